"""User database table model."""

from sqlmodel import Field

from todo_directory.app.entities.core._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users.

    Email and phone carry unique constraints so the store rejects
    duplicates even if a caller skips the service-level check.
    """

    first_name: str
    last_name: str
    email: str = Field(unique=True, index=True)
    phone: str = Field(unique=True, index=True)
