"""User repository for data access operations."""

from sqlmodel import Session, select

from todo_directory.app.core.exceptions import user_not_found
from todo_directory.app.entities.core.group.table import GroupTable
from todo_directory.app.entities.core.membership.table import UserGroupLinkTable
from todo_directory.app.entities.core.task.table import TaskTable
from todo_directory.app.entities.core.user.entity import User
from todo_directory.app.entities.core.user.table import UserTable

_COLUMNS = {"first_name", "last_name", "email", "phone", "created_at"}


class UserRepository:
    """Data-access layer for users.

    The repository flushes but never commits; the surrounding session scope
    owns the transaction. Membership edges are read here but only ever
    written through ``GroupRepository``.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, user_id: int) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return self._to_entity(row)

    def get_by_email(self, email: str) -> User | None:
        row = self._session.exec(
            select(UserTable).where(UserTable.email == email)
        ).first()
        if row is None:
            return None
        return self._to_entity(row)

    def get_by_phone(self, phone: str) -> User | None:
        row = self._session.exec(
            select(UserTable).where(UserTable.phone == phone)
        ).first()
        if row is None:
            return None
        return self._to_entity(row)

    def list_all(self) -> list[User]:
        rows = self._session.exec(select(UserTable).order_by(UserTable.id)).all()
        return [self._to_entity(row) for row in rows]

    def list_by_group_name(self, group_name: str) -> list[User]:
        """Return members of the group called ``group_name``.

        An unknown group name and an empty group both yield an empty list.
        """
        statement = (
            select(UserTable)
            .join(UserGroupLinkTable, UserGroupLinkTable.user_id == UserTable.id)
            .join(GroupTable, GroupTable.id == UserGroupLinkTable.group_id)
            .where(GroupTable.name == group_name)
            .order_by(UserTable.id)
        )
        rows = self._session.exec(statement).all()
        return [self._to_entity(row) for row in rows]

    def exists(self, user_id: int) -> bool:
        return self._session.get(UserTable, user_id) is not None

    def exists_by_email(self, email: str) -> bool:
        statement = select(UserTable.id).where(UserTable.email == email)
        return self._session.exec(statement).first() is not None

    def exists_by_phone(self, phone: str) -> bool:
        statement = select(UserTable.id).where(UserTable.phone == phone)
        return self._session.exec(statement).first() is not None

    def create(self, user: User) -> User:
        row = UserTable(**user.model_dump(include=_COLUMNS))
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def update(self, user: User) -> User:
        if user.id is None:
            raise ValueError("Cannot update a user that has not been saved")
        row = self._session.get(UserTable, user.id)
        if row is None:
            raise user_not_found(user.id)

        for field in ("first_name", "last_name", "email", "phone"):
            setattr(row, field, getattr(user, field))

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def save(self, user: User) -> User:
        """Insert a new user or update an existing one."""
        if user.id is None:
            return self.create(user)
        return self.update(user)

    def delete(self, user_id: int) -> None:
        """Delete the user row together with the tasks it owns."""
        row = self._session.get(UserTable, user_id)
        if row is None:
            return

        tasks = self._session.exec(
            select(TaskTable).where(TaskTable.user_id == user_id)
        ).all()
        for task in tasks:
            self._session.delete(task)
        # Tasks reference the user row; they must be gone before it is
        self._session.flush()

        self._session.delete(row)
        self._session.flush()

    def _to_entity(self, row: UserTable) -> User:
        user = User.model_validate(row, from_attributes=True)
        user.group_ids = set(
            self._session.exec(
                select(UserGroupLinkTable.group_id).where(
                    UserGroupLinkTable.user_id == row.id
                )
            ).all()
        )
        user.task_ids = list(
            self._session.exec(
                select(TaskTable.id)
                .where(TaskTable.user_id == row.id)
                .order_by(TaskTable.id)
            ).all()
        )
        return user
