"""Group directory service."""

from loguru import logger

from todo_directory.app.core.exceptions import group_name_not_found, group_not_found
from todo_directory.app.core.models.group import (
    GroupCreateRequest,
    GroupResponse,
    GroupUpdateRequest,
)
from todo_directory.app.core.services.membership.relationship_coordinator import (
    RelationshipCoordinator,
)
from todo_directory.app.entities.core.group.entity import Group
from todo_directory.app.entities.core.group.repository import GroupRepository


class GroupDirectoryService:
    """Group CRUD. Membership teardown on delete goes through the coordinator."""

    def __init__(self, group_repo: GroupRepository, coordinator: RelationshipCoordinator):
        self._group_repo = group_repo
        self._coordinator = coordinator

    def find_all(self) -> list[GroupResponse]:
        return [GroupResponse.from_entity(group) for group in self._group_repo.list_all()]

    def get(self, group_id: int) -> GroupResponse:
        return GroupResponse.from_entity(self._load(group_id))

    def get_by_name(self, name: str) -> GroupResponse:
        group = self._group_repo.get_by_name(name)
        if group is None:
            logger.warning("Group {!r} not found", name)
            raise group_name_not_found(name)
        return GroupResponse.from_entity(group)

    def create(self, request: GroupCreateRequest) -> GroupResponse:
        """Persist a new group.

        Raises:
            AlreadyExistsError: if the store rejects the name as a duplicate.
        """
        saved = self._group_repo.save(request.to_entity())
        logger.info("Created group {} ({})", saved.id, saved.name)
        return GroupResponse.from_entity(saved)

    def update(self, group_id: int, request: GroupUpdateRequest) -> GroupResponse:
        """Apply the name/description present in ``request``."""
        group = self._load(group_id)
        changes = request.changes()
        for field, value in changes.items():
            setattr(group, field, value)

        saved = self._group_repo.save(group)
        logger.info("Updated group {} fields {}", group_id, sorted(changes))
        return GroupResponse.from_entity(saved)

    def delete(self, group_id: int) -> None:
        """Delete a group after detaching all of its members.

        Raises:
            NotFoundError: if the group does not exist.
        """
        group = self._load(group_id)
        self._coordinator.cascade_on_group_delete(group)
        self._group_repo.delete(group_id)
        logger.info("Deleted group {}", group_id)

    def _load(self, group_id: int) -> Group:
        group = self._group_repo.get(group_id)
        if group is None:
            logger.warning("Group {} not found", group_id)
            raise group_not_found(group_id)
        return group
