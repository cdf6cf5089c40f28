"""
Repository layer.

Repositories wrap the SQL for one table and operate on a cursor that
belongs to an open transaction (see ``core.db.transaction``).  They
never commit; the owning service decides the unit of work.
"""

from .task_repository import TaskRepository
from .user_repository import UserRepository

__all__ = ["TaskRepository", "UserRepository"]
