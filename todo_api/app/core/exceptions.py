"""
Domain errors raised by the service layer.

Each error carries the HTTP status code the API should answer with and
a human readable message.  ``main.create_app`` registers a single
handler for ``TodoAppError`` which renders ``{"message": ...}``.
"""

from typing import Any


class TodoAppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ResourceNotFoundError(TodoAppError):
    """An id-based lookup (or a foreign key reference) did not resolve."""

    status_code = 404

    def __init__(self, entity: str, entity_id: Any) -> None:
        super().__init__(f"{entity} not found with id: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class DuplicateResourceError(TodoAppError):
    """A user with the requested email already exists."""

    status_code = 409

    def __init__(self, email: str) -> None:
        super().__init__(f"User with email {email} already exists")
        self.email = email
