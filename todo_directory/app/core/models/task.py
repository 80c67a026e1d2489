"""Task request and response types."""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from todo_directory.app.entities.core.task.entity import Task


class TaskCreateRequest(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    content: str | None = None
    is_important: bool = False
    is_completed: bool = False
    deadline_date: date | None = None
    user_id: int

    def to_entity(self) -> Task:
        return Task(**self.model_dump())


class TaskUpdateRequest(BaseModel):
    """Partial update of a task. ``None`` keeps the stored value."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    content: str | None = None
    is_important: bool | None = None
    is_completed: bool | None = None
    deadline_date: date | None = None

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class TaskResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    content: str | None = None
    is_important: bool
    is_completed: bool
    deadline_date: date | None = None
    user_id: int

    @classmethod
    def from_entity(cls, task: Task) -> TaskResponse:
        if task.id is None:
            raise ValueError("Cannot build a response for an unsaved task")
        return cls.model_validate(task.model_dump(exclude={"created_at", "updated_at"}))
