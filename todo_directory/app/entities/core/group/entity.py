"""Entity: Group."""

from typing import Any

from pydantic import Field

from todo_directory.app.entities.core._base import Entity


class Group(Entity):
    """Group entity, a named set of member users."""

    name: str = Field(description="Group name, unique across groups")
    description: str | None = Field(default=None, description="Description")
    user_ids: set[int] = Field(
        default_factory=set, description="Users that are members of this group"
    )

    def add_member(self, user_id: int) -> bool:
        """Record ``user_id`` as a member. Returns False if already present."""
        if user_id in self.user_ids:
            return False
        self.user_ids.add(user_id)
        return True

    def remove_member(self, user_id: int) -> bool:
        """Drop ``user_id`` from the members. Returns False if absent."""
        if user_id not in self.user_ids:
            return False
        self.user_ids.discard(user_id)
        return True

    def __eq__(self, other: Any) -> bool:
        """Compare groups by business attributes, ignoring timestamps."""
        if not isinstance(other, Group):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.name,
            self.description,
        ))
