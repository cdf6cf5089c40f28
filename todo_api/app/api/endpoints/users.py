"""
User endpoints.

CRUD over users.  Domain errors raised by ``UserService`` are turned
into ``{"message": ...}`` responses by the handlers registered in
``main.create_app`` (404 for unknown ids, 409 for a taken email).
"""

from typing import List

from fastapi import APIRouter, status

from todo_api.app.api.params import EntityId
from todo_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from todo_api.app.services.user_service import UserService


router = APIRouter()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(user_in: UserCreate) -> UserRead:
    """Register a new user; the email must not be in use."""
    return await UserService.create_user(user_in)


@router.get("", response_model=List[UserRead])
async def list_users() -> List[UserRead]:
    return await UserService.list_users()


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: EntityId) -> UserRead:
    return await UserService.get_user(user_id)


@router.put("/{user_id}", response_model=UserRead)
async def update_user(user_id: EntityId, user_in: UserUpdate) -> UserRead:
    """Replace a user's name and email."""
    return await UserService.update_user(user_id, user_in)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: EntityId) -> None:
    """Delete a user and, through the foreign key cascade, its tasks."""
    await UserService.delete_user(user_id)
    return None
