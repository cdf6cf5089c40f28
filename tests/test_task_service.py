# tests/test_task_service.py

from __future__ import annotations

import pytest

from todo_api.app.core.db import transaction
from todo_api.app.core.exceptions import ResourceNotFoundError
from todo_api.app.models import User
from todo_api.app.repositories import TaskRepository, UserRepository
from todo_api.app.schemas.task import TaskCreate, TaskUpdate
from todo_api.app.schemas.user import UserCreate
from todo_api.app.services.task_service import TaskService
from todo_api.app.services.user_service import UserService


def _task_count() -> int:
    with transaction() as cursor:
        return TaskRepository(cursor).count()


@pytest.fixture()
def owner_id() -> int:
    with transaction() as cursor:
        user = UserRepository(cursor).save(User(name="John Doe", email="john@example.com"))
    return user.id


@pytest.mark.asyncio
async def test_create_task_defaults_to_incomplete(owner_id: int) -> None:
    task = await TaskService.create_task(
        TaskCreate(title="Test Task", description="Description", user_id=owner_id)
    )

    assert task.id is not None
    assert task.title == "Test Task"
    assert task.description == "Description"
    assert task.is_completed is False
    assert task.user_id == owner_id


@pytest.mark.asyncio
async def test_create_task_keeps_explicit_completion(owner_id: int) -> None:
    task = await TaskService.create_task(
        TaskCreate(title="Already done", is_completed=True, user_id=owner_id)
    )

    assert task.is_completed is True
    assert task.description is None


@pytest.mark.asyncio
async def test_create_task_for_unknown_user_writes_nothing() -> None:
    with pytest.raises(ResourceNotFoundError) as excinfo:
        await TaskService.create_task(TaskCreate(title="Invalid Task", user_id=9999))

    assert excinfo.value.message == "User not found with id: 9999"
    assert _task_count() == 0


@pytest.mark.asyncio
async def test_get_task(owner_id: int) -> None:
    task = await TaskService.create_task(TaskCreate(title="Test Task", user_id=owner_id))

    assert await TaskService.get_task(task.id) == task


@pytest.mark.asyncio
async def test_get_missing_task() -> None:
    with pytest.raises(ResourceNotFoundError) as excinfo:
        await TaskService.get_task(9999)

    assert excinfo.value.message == "Task not found with id: 9999"


@pytest.mark.asyncio
async def test_list_tasks_across_owners(owner_id: int) -> None:
    other = await UserService.create_user(UserCreate(name="Jane Doe", email="jane@example.com"))
    first = await TaskService.create_task(TaskCreate(title="Task 1", user_id=owner_id))
    second = await TaskService.create_task(TaskCreate(title="Task 2", user_id=other.id))

    assert await TaskService.list_tasks() == [first, second]


@pytest.mark.asyncio
async def test_list_tasks_by_owner(owner_id: int) -> None:
    other = await UserService.create_user(UserCreate(name="Jane Doe", email="jane@example.com"))
    first = await TaskService.create_task(TaskCreate(title="Task 1", user_id=owner_id))
    second = await TaskService.create_task(
        TaskCreate(title="Task 2", is_completed=True, user_id=owner_id)
    )
    await TaskService.create_task(TaskCreate(title="Jane's", user_id=other.id))

    assert await TaskService.list_tasks_by_owner(owner_id) == [first, second]
    assert await TaskService.list_tasks_by_owner(owner_id, is_completed=True) == [second]
    assert await TaskService.list_tasks_by_owner(owner_id, is_completed=False) == [first]


@pytest.mark.asyncio
async def test_list_tasks_by_owner_without_tasks(owner_id: int) -> None:
    assert await TaskService.list_tasks_by_owner(owner_id) == []


@pytest.mark.asyncio
async def test_list_tasks_by_unknown_owner() -> None:
    with pytest.raises(ResourceNotFoundError) as excinfo:
        await TaskService.list_tasks_by_owner(9999)

    assert excinfo.value.message == "User not found with id: 9999"


@pytest.mark.asyncio
async def test_update_task_replaces_fields_and_keeps_owner(owner_id: int) -> None:
    task = await TaskService.create_task(
        TaskCreate(title="Old", description="old text", user_id=owner_id)
    )

    updated = await TaskService.update_task(
        task.id, TaskUpdate(title="New", description=None, is_completed=True)
    )

    assert updated.id == task.id
    assert updated.title == "New"
    assert updated.description is None
    assert updated.is_completed is True
    assert updated.user_id == owner_id
    assert await TaskService.get_task(task.id) == updated


@pytest.mark.asyncio
async def test_update_missing_task() -> None:
    with pytest.raises(ResourceNotFoundError):
        await TaskService.update_task(9999, TaskUpdate(title="X", is_completed=False))


@pytest.mark.asyncio
async def test_update_status_only_touches_completion(owner_id: int) -> None:
    task = await TaskService.create_task(
        TaskCreate(title="Buy groceries", description="Milk, bread, eggs", user_id=owner_id)
    )

    updated = await TaskService.update_task_status(task.id, True)

    assert updated.is_completed is True
    assert updated.model_copy(update={"is_completed": False}) == task

    reopened = await TaskService.update_task_status(task.id, False)
    assert reopened == task


@pytest.mark.asyncio
async def test_update_status_of_missing_task() -> None:
    with pytest.raises(ResourceNotFoundError) as excinfo:
        await TaskService.update_task_status(9999, True)

    assert excinfo.value.message == "Task not found with id: 9999"


@pytest.mark.asyncio
async def test_delete_task(owner_id: int) -> None:
    keep = await TaskService.create_task(TaskCreate(title="Keep", user_id=owner_id))
    drop = await TaskService.create_task(TaskCreate(title="Drop", user_id=owner_id))

    await TaskService.delete_task(drop.id)

    assert await TaskService.list_tasks() == [keep]


@pytest.mark.asyncio
async def test_delete_missing_task_leaves_state_alone(owner_id: int) -> None:
    await TaskService.create_task(TaskCreate(title="Keep", user_id=owner_id))

    with pytest.raises(ResourceNotFoundError):
        await TaskService.delete_task(9999)

    assert _task_count() == 1


@pytest.mark.asyncio
async def test_deleting_owner_removes_its_tasks(owner_id: int) -> None:
    other = await UserService.create_user(UserCreate(name="Jane Doe", email="jane@example.com"))
    await TaskService.create_task(TaskCreate(title="Task 1", user_id=owner_id))
    await TaskService.create_task(TaskCreate(title="Task 2", user_id=owner_id))
    survivor = await TaskService.create_task(TaskCreate(title="Jane's", user_id=other.id))

    await UserService.delete_user(owner_id)

    assert await TaskService.list_tasks() == [survivor]
    with pytest.raises(ResourceNotFoundError):
        await TaskService.list_tasks_by_owner(owner_id)
