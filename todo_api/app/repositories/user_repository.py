"""
SQL access for the ``users`` table.
"""

import sqlite3
from dataclasses import replace
from typing import List, Optional

from todo_api.app.models import User


class UserRepository:
    """Repository for user rows.

    All queries use parameterized statements.
    """

    def __init__(self, cursor: sqlite3.Cursor) -> None:
        self.cursor = cursor

    def get(self, user_id: int) -> Optional[User]:
        row = self.cursor.execute(
            "SELECT id, name, email FROM users WHERE id = ?",
            (user_id,),
        ).fetchone()
        return User.from_row(row) if row else None

    def list(self) -> List[User]:
        rows = self.cursor.execute(
            "SELECT id, name, email FROM users ORDER BY id"
        ).fetchall()
        return [User.from_row(row) for row in rows]

    def find_by_email(self, email: str) -> Optional[User]:
        row = self.cursor.execute(
            "SELECT id, name, email FROM users WHERE email = ?",
            (email,),
        ).fetchone()
        return User.from_row(row) if row else None

    def exists_by_id(self, user_id: int) -> bool:
        row = self.cursor.execute(
            "SELECT 1 FROM users WHERE id = ?", (user_id,)
        ).fetchone()
        return row is not None

    def exists_by_email(self, email: str) -> bool:
        row = self.cursor.execute(
            "SELECT 1 FROM users WHERE email = ?", (email,)
        ).fetchone()
        return row is not None

    def save(self, user: User) -> User:
        """Insert ``user`` if it has no id yet, otherwise update it.

        Returns the stored user; for inserts this carries the generated id.
        ``sqlite3.IntegrityError`` propagates when the email is taken.
        """
        if user.id is None:
            self.cursor.execute(
                "INSERT INTO users (name, email) VALUES (?, ?)",
                (user.name, user.email),
            )
            return replace(user, id=self.cursor.lastrowid)
        self.cursor.execute(
            "UPDATE users SET name = ?, email = ? WHERE id = ?",
            (user.name, user.email, user.id),
        )
        return user

    def delete_by_id(self, user_id: int) -> bool:
        """Delete a user; owned tasks go with it through ``ON DELETE CASCADE``."""
        self.cursor.execute("DELETE FROM users WHERE id = ?", (user_id,))
        return self.cursor.rowcount > 0

    def count(self) -> int:
        row = self.cursor.execute("SELECT COUNT(*) AS count FROM users").fetchone()
        return row["count"]
