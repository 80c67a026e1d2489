"""Entity: Task."""

from datetime import date

from pydantic import Field

from todo_directory.app.entities.core._base import Entity


class Task(Entity):
    """Task entity, exclusively owned by a single user."""

    title: str = Field(description="Title")
    content: str | None = Field(default=None, description="Body text")
    is_important: bool = Field(default=False, description="Importance flag")
    is_completed: bool = Field(default=False, description="Completion flag")
    deadline_date: date | None = Field(default=None, description="Deadline")
    user_id: int = Field(description="Owning user")
