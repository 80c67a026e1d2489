"""Group repository for data access operations."""

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from todo_directory.app.core.exceptions import AlreadyExistsError, group_not_found
from todo_directory.app.entities.core.group.entity import Group
from todo_directory.app.entities.core.group.table import GroupTable
from todo_directory.app.entities.core.membership.table import UserGroupLinkTable


class GroupRepository:
    """Data-access layer for groups.

    Saving a group is the single point where membership edges are written:
    the link rows for the group are made to match ``Group.user_ids``.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, group_id: int) -> Group | None:
        row = self._session.get(GroupTable, group_id)
        if row is None:
            return None
        return self._to_entity(row)

    def get_by_name(self, name: str) -> Group | None:
        row = self._session.exec(
            select(GroupTable).where(GroupTable.name == name)
        ).first()
        if row is None:
            return None
        return self._to_entity(row)

    def list_all(self) -> list[Group]:
        rows = self._session.exec(select(GroupTable).order_by(GroupTable.id)).all()
        return [self._to_entity(row) for row in rows]

    def exists(self, group_id: int) -> bool:
        return self._session.get(GroupTable, group_id) is not None

    def exists_by_name(self, name: str) -> bool:
        statement = select(GroupTable.id).where(GroupTable.name == name)
        return self._session.exec(statement).first() is not None

    def save(self, group: Group) -> Group:
        """Insert or update the group row and sync its membership edges.

        Raises:
            AlreadyExistsError: if another group already uses the name.
        """
        owner_id = self._session.exec(
            select(GroupTable.id).where(GroupTable.name == group.name)
        ).first()
        if owner_id is not None and owner_id != group.id:
            logger.warning("Group name {!r} already taken by {}", group.name, owner_id)
            raise AlreadyExistsError(f"Group with name {group.name} already exists")

        if group.id is None:
            row = GroupTable(
                name=group.name,
                description=group.description,
                created_at=group.created_at,
            )
        else:
            row = self._session.get(GroupTable, group.id)
            if row is None:
                raise group_not_found(group.id)
            row.name = group.name
            row.description = group.description

        self._session.add(row)
        try:
            self._session.flush()
        except IntegrityError as e:
            logger.warning("Group save rejected by store: {}", group.name)
            raise AlreadyExistsError(
                f"Group with name {group.name} already exists"
            ) from e
        self._session.refresh(row)

        self._sync_members(row.id, group.user_ids)
        return self._to_entity(row)

    def delete(self, group_id: int) -> None:
        row = self._session.get(GroupTable, group_id)
        if row is None:
            return
        self._session.delete(row)
        self._session.flush()

    def _sync_members(self, group_id: int, user_ids: set[int]) -> None:
        links = self._session.exec(
            select(UserGroupLinkTable).where(UserGroupLinkTable.group_id == group_id)
        ).all()
        current = {link.user_id for link in links}

        for link in links:
            if link.user_id not in user_ids:
                self._session.delete(link)
        for user_id in user_ids - current:
            self._session.add(UserGroupLinkTable(user_id=user_id, group_id=group_id))

        self._session.flush()

    def _to_entity(self, row: GroupTable) -> Group:
        group = Group.model_validate(row, from_attributes=True)
        group.user_ids = set(
            self._session.exec(
                select(UserGroupLinkTable.user_id).where(
                    UserGroupLinkTable.group_id == row.id
                )
            ).all()
        )
        return group
