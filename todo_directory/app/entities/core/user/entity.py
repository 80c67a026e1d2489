"""User domain entity."""

from typing import Any

from pydantic import Field

from todo_directory.app.entities.core._base import Entity


class User(Entity):
    """User entity representing a person in the directory.

    Group memberships and owned tasks are held as identifiers only. The
    membership edge itself is owned by the relationship coordinator, which
    keeps ``group_ids`` here and ``Group.user_ids`` in step.
    """

    first_name: str = Field(description="User's first name")
    last_name: str = Field(description="User's last name")
    email: str = Field(description="User's email address, unique across users")
    phone: str = Field(description="User's phone number, unique across users")
    group_ids: set[int] = Field(
        default_factory=set, description="Groups this user belongs to"
    )
    task_ids: list[int] = Field(
        default_factory=list, description="Tasks owned by this user, in id order"
    )

    def join(self, group_id: int) -> bool:
        """Record membership of ``group_id``. Returns False if already a member."""
        if group_id in self.group_ids:
            return False
        self.group_ids.add(group_id)
        return True

    def leave(self, group_id: int) -> bool:
        """Drop membership of ``group_id``. Returns False if not a member."""
        if group_id not in self.group_ids:
            return False
        self.group_ids.discard(group_id)
        return True

    def __eq__(self, other: Any) -> bool:
        """Compare users by business attributes, ignoring timestamps."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.first_name == other.first_name
            and self.last_name == other.last_name
            and self.email == other.email
            and self.phone == other.phone
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.first_name,
            self.last_name,
            self.email,
            self.phone,
        ))
