"""Task database table model."""

from datetime import date

from sqlmodel import Field

from todo_directory.app.entities.core._base import EntityTable


class TaskTable(EntityTable, table=True):
    """Database persistence model for tasks."""

    title: str
    content: str | None = None
    is_important: bool = False
    is_completed: bool = False
    deadline_date: date | None = None
    user_id: int = Field(foreign_key="usertable.id", index=True)
