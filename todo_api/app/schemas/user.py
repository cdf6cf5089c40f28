"""
Pydantic models for user data.

``UserCreate`` and ``UserUpdate`` validate request bodies; ``UserRead``
is the representation returned by the API.  Conversion to and from the
persisted ``User`` entity is explicit (``UserRead.from_entity`` and
``UserRead.to_entity``) so every field is mapped deliberately.
"""

from pydantic import BaseModel, Field

from todo_api.app.models import User


EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"


class UserBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Alice Johnson"])
    email: str = Field(..., pattern=EMAIL_PATTERN, examples=["alice@example.com"])


class UserCreate(UserBase):
    """Schema for registering a user."""


class UserUpdate(UserBase):
    """Schema for replacing a user's name and email.

    Both fields are required; the email is re-checked for uniqueness
    when it differs from the stored one.
    """


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }

    @classmethod
    def from_entity(cls, user: User) -> "UserRead":
        return cls(id=user.id, name=user.name, email=user.email)

    def to_entity(self) -> User:
        return User(id=self.id, name=self.name, email=self.email)
