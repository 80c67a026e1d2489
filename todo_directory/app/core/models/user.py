"""User request and read-model types."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from todo_directory.app.entities.core.user.entity import User


class UserCreateRequest(BaseModel):
    """Fields required to create a user."""

    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=255)
    phone: str = Field(min_length=1, max_length=32)

    def to_entity(self) -> User:
        return User(**self.model_dump())


class UserUpdateRequest(BaseModel):
    """Partial update of a user.

    A field left as ``None`` keeps the stored value.
    """

    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    email: str | None = Field(default=None, min_length=3, max_length=255)
    phone: str | None = Field(default=None, min_length=1, max_length=32)

    def changes(self) -> dict[str, str]:
        """Return only the fields that carry a new value."""
        return self.model_dump(exclude_none=True)


class UserResponse(BaseModel):
    """Read-model snapshot of a user, as cached and returned to callers.

    The snapshot is frozen and carries scalar fields only, so membership
    changes never leave a cached entry out of date.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    first_name: str
    last_name: str
    email: str
    phone: str

    @classmethod
    def from_entity(cls, user: User) -> UserResponse:
        if user.id is None:
            raise ValueError("Cannot build a read-model for an unsaved user")
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            phone=user.phone,
        )
