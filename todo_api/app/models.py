"""
Persisted entities.

These dataclasses mirror the rows of the ``users`` and ``tasks`` tables.
They are kept separate from the Pydantic schemas in ``schemas`` so the
wire format can evolve without touching the storage layer.  ``id`` is
``None`` until the entity has been saved.
"""

import sqlite3
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class User:
    name: str
    email: str
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "User":
        return cls(id=row["id"], name=row["name"], email=row["email"])


@dataclass(frozen=True)
class Task:
    """A task owned by exactly one user.

    ``owner_id`` is a plain foreign key; the owning ``User`` is never
    loaded alongside the task.
    """

    title: str
    owner_id: int
    description: Optional[str] = None
    is_completed: bool = False
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Task":
        return cls(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            is_completed=bool(row["is_completed"]),
            owner_id=row["user_id"],
        )
