"""
SQL access for the ``tasks`` table.
"""

import sqlite3
from dataclasses import replace
from typing import List, Optional

from todo_api.app.models import Task


_COLUMNS = "id, title, description, is_completed, user_id"


class TaskRepository:
    """Repository for task rows."""

    def __init__(self, cursor: sqlite3.Cursor) -> None:
        self.cursor = cursor

    def get(self, task_id: int) -> Optional[Task]:
        row = self.cursor.execute(
            f"SELECT {_COLUMNS} FROM tasks WHERE id = ?",
            (task_id,),
        ).fetchone()
        return Task.from_row(row) if row else None

    def list(self) -> List[Task]:
        rows = self.cursor.execute(
            f"SELECT {_COLUMNS} FROM tasks ORDER BY id"
        ).fetchall()
        return [Task.from_row(row) for row in rows]

    def list_by_owner(self, owner_id: int, is_completed: Optional[bool] = None) -> List[Task]:
        """Return the tasks of one user, optionally only (in)complete ones."""
        if is_completed is None:
            rows = self.cursor.execute(
                f"SELECT {_COLUMNS} FROM tasks WHERE user_id = ? ORDER BY id",
                (owner_id,),
            ).fetchall()
        else:
            rows = self.cursor.execute(
                f"SELECT {_COLUMNS} FROM tasks WHERE user_id = ? AND is_completed = ? ORDER BY id",
                (owner_id, 1 if is_completed else 0),
            ).fetchall()
        return [Task.from_row(row) for row in rows]

    def exists_by_id(self, task_id: int) -> bool:
        row = self.cursor.execute(
            "SELECT 1 FROM tasks WHERE id = ?", (task_id,)
        ).fetchone()
        return row is not None

    def save(self, task: Task) -> Task:
        """Insert ``task`` if it has no id yet, otherwise update it.

        The owner column is written on insert only; updates never move a
        task to another user.
        """
        is_completed = 1 if task.is_completed else 0
        if task.id is None:
            self.cursor.execute(
                "INSERT INTO tasks (title, description, is_completed, user_id) VALUES (?, ?, ?, ?)",
                (task.title, task.description, is_completed, task.owner_id),
            )
            return replace(task, id=self.cursor.lastrowid)
        self.cursor.execute(
            "UPDATE tasks SET title = ?, description = ?, is_completed = ? WHERE id = ?",
            (task.title, task.description, is_completed, task.id),
        )
        return task

    def delete_by_id(self, task_id: int) -> bool:
        self.cursor.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
        return self.cursor.rowcount > 0

    def count(self) -> int:
        row = self.cursor.execute("SELECT COUNT(*) AS count FROM tasks").fetchone()
        return row["count"]
