"""
Business logic for tasks.

Every task belongs to exactly one user.  ``TaskService`` checks that the
owner exists when a task is created (and when tasks are listed per
owner) inside the same transaction as the read or write that depends on
it.  Ownership is fixed at creation: neither update path touches it.
"""

import logging
from typing import List, Optional

from todo_api.app.core.db import transaction
from todo_api.app.core.exceptions import ResourceNotFoundError
from todo_api.app.models import Task
from todo_api.app.repositories import TaskRepository, UserRepository
from todo_api.app.schemas.task import TaskCreate, TaskRead, TaskUpdate


logger = logging.getLogger(__name__)


class TaskService:
    """Service for creating, reading, updating and deleting tasks."""

    @classmethod
    async def create_task(cls, data: TaskCreate) -> TaskRead:
        """Create a task for an existing user.

        Raises ``ResourceNotFoundError`` for the user when ``data.user_id``
        does not resolve; nothing is written in that case.  A missing
        completion flag is stored as ``False``.
        """
        with transaction() as cursor:
            if not UserRepository(cursor).exists_by_id(data.user_id):
                raise ResourceNotFoundError("User", data.user_id)
            task = Task(
                title=data.title,
                description=data.description,
                is_completed=data.is_completed if data.is_completed is not None else False,
                owner_id=data.user_id,
            )
            saved = TaskRepository(cursor).save(task)
        logger.info("Created task %s for user %s", saved.id, saved.owner_id)
        return TaskRead.from_entity(saved)

    @classmethod
    async def get_task(cls, task_id: int) -> TaskRead:
        with transaction() as cursor:
            task = TaskRepository(cursor).get(task_id)
        if task is None:
            raise ResourceNotFoundError("Task", task_id)
        return TaskRead.from_entity(task)

    @classmethod
    async def list_tasks(cls) -> List[TaskRead]:
        with transaction() as cursor:
            tasks = TaskRepository(cursor).list()
        return [TaskRead.from_entity(task) for task in tasks]

    @classmethod
    async def list_tasks_by_owner(
        cls,
        owner_id: int,
        is_completed: Optional[bool] = None,
    ) -> List[TaskRead]:
        """Return the tasks of one user.

        Parameters
        ----------
        owner_id : int
            Identifier of the owning user.  An unknown user raises
            ``ResourceNotFoundError`` even though the result would simply
            be empty.
        is_completed : Optional[bool]
            When given, only tasks with this completion flag are returned.
        """
        with transaction() as cursor:
            if not UserRepository(cursor).exists_by_id(owner_id):
                raise ResourceNotFoundError("User", owner_id)
            tasks = TaskRepository(cursor).list_by_owner(owner_id, is_completed=is_completed)
        return [TaskRead.from_entity(task) for task in tasks]

    @classmethod
    async def update_task(cls, task_id: int, data: TaskUpdate) -> TaskRead:
        """Replace title, description and completion flag of a task."""
        with transaction() as cursor:
            tasks = TaskRepository(cursor)
            task = tasks.get(task_id)
            if task is None:
                raise ResourceNotFoundError("Task", task_id)
            updated = tasks.save(
                Task(
                    id=task.id,
                    title=data.title,
                    description=data.description,
                    is_completed=data.is_completed,
                    owner_id=task.owner_id,
                )
            )
        logger.info("Updated task %s", task_id)
        return TaskRead.from_entity(updated)

    @classmethod
    async def update_task_status(cls, task_id: int, is_completed: bool) -> TaskRead:
        """Set only the completion flag of a task."""
        with transaction() as cursor:
            tasks = TaskRepository(cursor)
            task = tasks.get(task_id)
            if task is None:
                raise ResourceNotFoundError("Task", task_id)
            updated = tasks.save(
                Task(
                    id=task.id,
                    title=task.title,
                    description=task.description,
                    is_completed=is_completed,
                    owner_id=task.owner_id,
                )
            )
        logger.info("Task %s marked %s", task_id, "completed" if is_completed else "open")
        return TaskRead.from_entity(updated)

    @classmethod
    async def delete_task(cls, task_id: int) -> None:
        with transaction() as cursor:
            tasks = TaskRepository(cursor)
            if not tasks.exists_by_id(task_id):
                raise ResourceNotFoundError("Task", task_id)
            tasks.delete_by_id(task_id)
        logger.info("Deleted task %s", task_id)
