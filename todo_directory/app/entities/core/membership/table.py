"""Membership edge table model."""

from sqlmodel import Field, SQLModel


class UserGroupLinkTable(SQLModel, table=True):
    """Persistence model for a single User-Group membership edge."""

    user_id: int = Field(foreign_key="usertable.id", primary_key=True, index=True)
    group_id: int = Field(foreign_key="grouptable.id", primary_key=True, index=True)
