"""Task repository for data access operations."""

from sqlmodel import Session, select

from todo_directory.app.core.exceptions import task_not_found
from todo_directory.app.entities.core.task.entity import Task
from todo_directory.app.entities.core.task.table import TaskTable

_FIELDS = ("title", "content", "is_important", "is_completed", "deadline_date", "user_id")


class TaskRepository:
    """Data-access layer for tasks."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, task_id: int) -> Task | None:
        row = self._session.get(TaskTable, task_id)
        if row is None:
            return None
        return Task.model_validate(row, from_attributes=True)

    def list_all(self) -> list[Task]:
        rows = self._session.exec(select(TaskTable).order_by(TaskTable.id)).all()
        return [Task.model_validate(row, from_attributes=True) for row in rows]

    def list_by_user(self, user_id: int) -> list[Task]:
        rows = self._session.exec(
            select(TaskTable).where(TaskTable.user_id == user_id).order_by(TaskTable.id)
        ).all()
        return [Task.model_validate(row, from_attributes=True) for row in rows]

    def exists(self, task_id: int) -> bool:
        return self._session.get(TaskTable, task_id) is not None

    def save(self, task: Task) -> Task:
        """Insert a new task or update an existing one."""
        if task.id is None:
            row = TaskTable(created_at=task.created_at, **{f: getattr(task, f) for f in _FIELDS})
        else:
            row = self._session.get(TaskTable, task.id)
            if row is None:
                raise task_not_found(task.id)
            for field in _FIELDS:
                setattr(row, field, getattr(task, field))

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Task.model_validate(row, from_attributes=True)

    def delete(self, task_id: int) -> None:
        row = self._session.get(TaskTable, task_id)
        if row is None:
            return
        self._session.delete(row)
        self._session.flush()
