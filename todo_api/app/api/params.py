"""Reusable path parameter declarations."""

from typing import Annotated

from fastapi import Path

from todo_api.app.schemas.common import ID_MAX, ID_MIN


EntityId = Annotated[int, Path(ge=ID_MIN, le=ID_MAX)]
