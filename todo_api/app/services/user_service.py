"""
Business logic for users.

``UserService`` owns the user lifecycle and the rule that no two users
share an email address.  Every public method runs inside one
``transaction`` so the uniqueness check and the write that follows it
cannot be interleaved with a concurrent writer.  The ``UNIQUE``
constraint on ``users.email`` backs the check up; a violation that
slips through is reported as the same ``DuplicateResourceError``.
"""

import logging
import sqlite3
from typing import List

from todo_api.app.core.db import transaction
from todo_api.app.core.exceptions import DuplicateResourceError, ResourceNotFoundError
from todo_api.app.models import User
from todo_api.app.repositories import UserRepository
from todo_api.app.schemas.user import UserCreate, UserRead, UserUpdate


logger = logging.getLogger(__name__)


def _is_email_conflict(exc: sqlite3.IntegrityError) -> bool:
    return "users.email" in str(exc)


class UserService:
    """Service for managing users."""

    @classmethod
    async def create_user(cls, data: UserCreate) -> UserRead:
        """Create a new user.

        Raises ``DuplicateResourceError`` if the email is already taken;
        nothing is written in that case.
        """
        with transaction() as cursor:
            users = UserRepository(cursor)
            if users.exists_by_email(data.email):
                logger.warning("Rejected duplicate email %s", data.email)
                raise DuplicateResourceError(data.email)
            try:
                saved = users.save(User(name=data.name, email=data.email))
            except sqlite3.IntegrityError as exc:
                if _is_email_conflict(exc):
                    raise DuplicateResourceError(data.email) from exc
                raise
        logger.info("Created user %s (%s)", saved.id, saved.email)
        return UserRead.from_entity(saved)

    @classmethod
    async def get_user(cls, user_id: int) -> UserRead:
        """Return a user or raise ``ResourceNotFoundError``."""
        with transaction() as cursor:
            user = UserRepository(cursor).get(user_id)
        if user is None:
            raise ResourceNotFoundError("User", user_id)
        return UserRead.from_entity(user)

    @classmethod
    async def list_users(cls) -> List[UserRead]:
        """Return all users ordered by id."""
        with transaction() as cursor:
            users = UserRepository(cursor).list()
        return [UserRead.from_entity(user) for user in users]

    @classmethod
    async def update_user(cls, user_id: int, data: UserUpdate) -> UserRead:
        """Overwrite a user's name and email.

        Keeping the current email is always allowed.  Switching to an
        email that belongs to another user raises ``DuplicateResourceError``.
        """
        with transaction() as cursor:
            users = UserRepository(cursor)
            user = users.get(user_id)
            if user is None:
                raise ResourceNotFoundError("User", user_id)
            if data.email != user.email:
                holder = users.find_by_email(data.email)
                if holder is not None and holder.id != user_id:
                    logger.warning("Rejected duplicate email %s for user %s", data.email, user_id)
                    raise DuplicateResourceError(data.email)
            try:
                updated = users.save(User(id=user_id, name=data.name, email=data.email))
            except sqlite3.IntegrityError as exc:
                if _is_email_conflict(exc):
                    raise DuplicateResourceError(data.email) from exc
                raise
        logger.info("Updated user %s", user_id)
        return UserRead.from_entity(updated)

    @classmethod
    async def delete_user(cls, user_id: int) -> None:
        """Delete a user together with all of its tasks."""
        with transaction() as cursor:
            users = UserRepository(cursor)
            if not users.exists_by_id(user_id):
                raise ResourceNotFoundError("User", user_id)
            users.delete_by_id(user_id)
        logger.info("Deleted user %s", user_id)
