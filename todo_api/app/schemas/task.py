"""
Pydantic models for tasks.

On the wire the completion flag and the owner reference are camelCase
(``isCompleted``, ``userId``); snake_case names are accepted on input as
well.  A task never embeds its owner: only the owner's id is exposed.
"""

from typing import Optional

from pydantic import BaseModel, Field

from todo_api.app.models import Task
from todo_api.app.schemas.common import ID_MAX, ID_MIN


class TaskCreate(BaseModel):
    """Schema for creating a task.

    ``isCompleted`` may be omitted and then defaults to ``False``.
    """

    title: str = Field(..., min_length=1, examples=["Buy groceries"])
    description: Optional[str] = Field(None, examples=["Milk, bread, eggs"])
    is_completed: Optional[bool] = Field(None, alias="isCompleted")
    user_id: int = Field(
        ..., alias="userId", ge=ID_MIN, le=ID_MAX, description="Identifier of the owning user"
    )

    model_config = {
        "populate_by_name": True,
    }


class TaskUpdate(BaseModel):
    """Schema for replacing a task's title, description and completion flag.

    ``isCompleted`` is required here: a full update must not leave the
    flag unset.  The owner cannot be changed.
    """

    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    is_completed: bool = Field(..., alias="isCompleted")

    model_config = {
        "populate_by_name": True,
    }


class TaskStatusUpdate(BaseModel):
    """Body of ``PATCH /tasks/{id}/status``."""

    is_completed: bool = Field(..., alias="isCompleted")

    model_config = {
        "populate_by_name": True,
    }


class TaskRead(BaseModel):
    """Schema for a task returned by the API."""

    id: int
    title: str
    description: Optional[str] = None
    is_completed: bool = Field(..., alias="isCompleted")
    user_id: int = Field(..., alias="userId")

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }

    @classmethod
    def from_entity(cls, task: Task) -> "TaskRead":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            is_completed=task.is_completed,
            user_id=task.owner_id,
        )

    def to_entity(self) -> Task:
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            is_completed=self.is_completed,
            owner_id=self.user_id,
        )
