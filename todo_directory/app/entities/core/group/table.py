"""Group database table model."""

from sqlmodel import Field

from todo_directory.app.entities.core._base import EntityTable


class GroupTable(EntityTable, table=True):
    """Database persistence model for groups."""

    name: str = Field(unique=True, index=True)
    description: str | None = None
