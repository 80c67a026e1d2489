"""Membership coordination between users and groups."""

from loguru import logger

from todo_directory.app.core.exceptions import group_not_found, user_not_found
from todo_directory.app.entities.core.group.entity import Group
from todo_directory.app.entities.core.group.repository import GroupRepository
from todo_directory.app.entities.core.user.entity import User
from todo_directory.app.entities.core.user.repository import UserRepository


class RelationshipCoordinator:
    """Keeps both sides of the User-Group relationship in step.

    Every change updates ``User.group_ids`` and ``Group.user_ids`` in memory
    and is made durable by saving the group, which rewrites that group's
    membership edges. The group is always the save point, whichever side
    triggered the change.
    """

    def __init__(self, user_repo: UserRepository, group_repo: GroupRepository):
        self._user_repo = user_repo
        self._group_repo = group_repo

    def _load_pair(self, user_id: int, group_id: int) -> tuple[User, Group]:
        # Both lookups complete before any mutation
        group = self._group_repo.get(group_id)
        if group is None:
            logger.warning("Membership change for missing group {}", group_id)
            raise group_not_found(group_id)
        user = self._user_repo.get(user_id)
        if user is None:
            logger.warning("Membership change for missing user {}", user_id)
            raise user_not_found(user_id)
        return user, group

    def add_membership(self, user_id: int, group_id: int) -> Group:
        """Add ``user_id`` to ``group_id``. Idempotent.

        Raises:
            NotFoundError: if either the group or the user does not exist.
        """
        user, group = self._load_pair(user_id, group_id)

        if user_id in group.user_ids and group_id in user.group_ids:
            logger.debug("User {} already in group {}", user_id, group_id)
            return group

        user.join(group_id)
        group.add_member(user_id)
        saved = self._group_repo.save(group)
        logger.info("Added user {} to group {}", user_id, group_id)
        return saved

    def remove_membership(self, user_id: int, group_id: int) -> Group:
        """Remove ``user_id`` from ``group_id``. Idempotent.

        Raises:
            NotFoundError: if either the group or the user does not exist.
        """
        user, group = self._load_pair(user_id, group_id)

        if user_id not in group.user_ids and group_id not in user.group_ids:
            logger.debug("User {} not in group {}", user_id, group_id)
            return group

        user.leave(group_id)
        group.remove_member(user_id)
        saved = self._group_repo.save(group)
        logger.info("Removed user {} from group {}", user_id, group_id)
        return saved

    def cascade_on_user_delete(self, user: User) -> None:
        """Detach ``user`` from every group it belongs to.

        Must complete before the user record is deleted.
        """
        for group_id in sorted(user.group_ids):
            group = self._group_repo.get(group_id)
            if group is not None and group.remove_member(user.id):
                self._group_repo.save(group)
        logger.debug("Detached user {} from groups {}", user.id, sorted(user.group_ids))
        user.group_ids.clear()

    def cascade_on_group_delete(self, group: Group) -> None:
        """Detach every member user from ``group``.

        Must complete before the group record is deleted.
        """
        member_ids = sorted(group.user_ids)
        for user_id in member_ids:
            user = self._user_repo.get(user_id)
            if user is not None:
                user.leave(group.id)
        group.user_ids.clear()
        self._group_repo.save(group)
        logger.debug("Detached users {} from group {}", member_ids, group.id)
