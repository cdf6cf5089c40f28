"""
Task endpoints.

These routes expose CRUD for tasks plus two narrower operations:
listing the tasks of a single user and flipping only the completion
flag.  Tasks are serialised with ``userId`` instead of an embedded user.
"""

from typing import List, Optional

from fastapi import APIRouter, Query, status

from todo_api.app.api.params import EntityId
from todo_api.app.schemas.task import TaskCreate, TaskRead, TaskStatusUpdate, TaskUpdate
from todo_api.app.services.task_service import TaskService


router = APIRouter()


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
async def create_task(task_in: TaskCreate) -> TaskRead:
    """Create a task for the user given by ``userId``.

    Returns HTTP 404 if that user does not exist.
    """
    return await TaskService.create_task(task_in)


@router.get("", response_model=List[TaskRead])
async def list_tasks() -> List[TaskRead]:
    return await TaskService.list_tasks()


@router.get("/user/{user_id}", response_model=List[TaskRead])
async def list_user_tasks(
    user_id: EntityId,
    is_completed: Optional[bool] = Query(
        None,
        alias="isCompleted",
        description="Only return tasks with this completion flag.",
    ),
) -> List[TaskRead]:
    """Return all tasks owned by a user.

    Returns HTTP 404 if the user does not exist, even when it would
    have no tasks.
    """
    return await TaskService.list_tasks_by_owner(user_id, is_completed=is_completed)


@router.get("/{task_id}", response_model=TaskRead)
async def get_task(task_id: EntityId) -> TaskRead:
    return await TaskService.get_task(task_id)


@router.put("/{task_id}", response_model=TaskRead)
async def update_task(task_id: EntityId, task_in: TaskUpdate) -> TaskRead:
    """Replace title, description and completion flag; the owner is kept."""
    return await TaskService.update_task(task_id, task_in)


@router.patch("/{task_id}/status", response_model=TaskRead)
async def update_task_status(task_id: EntityId, status_in: TaskStatusUpdate) -> TaskRead:
    """Change only the completion flag of a task."""
    return await TaskService.update_task_status(task_id, status_in.is_completed)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: EntityId) -> None:
    await TaskService.delete_task(task_id)
    return None
