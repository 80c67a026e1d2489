"""Group request and response types."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from todo_directory.app.entities.core.group.entity import Group


class GroupCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)

    def to_entity(self) -> Group:
        return Group(name=self.name, description=self.description)


class GroupUpdateRequest(BaseModel):
    """Partial update of a group. ``None`` keeps the stored value."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)

    def changes(self) -> dict[str, str]:
        return self.model_dump(exclude_none=True)


class GroupResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: str | None = None
    user_ids: list[int] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, group: Group) -> GroupResponse:
        if group.id is None:
            raise ValueError("Cannot build a response for an unsaved group")
        return cls(
            id=group.id,
            name=group.name,
            description=group.description,
            user_ids=sorted(group.user_ids),
        )
