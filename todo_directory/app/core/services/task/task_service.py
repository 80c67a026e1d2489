"""Task service."""

from loguru import logger

from todo_directory.app.core.exceptions import (
    InvalidInputError,
    task_not_found,
    user_not_found,
)
from todo_directory.app.core.models.task import (
    TaskCreateRequest,
    TaskResponse,
    TaskUpdateRequest,
)
from todo_directory.app.entities.core.task.entity import Task
from todo_directory.app.entities.core.task.repository import TaskRepository
from todo_directory.app.entities.core.user.repository import UserRepository


class TaskService:
    def __init__(self, task_repo: TaskRepository, user_repo: UserRepository):
        self._task_repo = task_repo
        self._user_repo = user_repo

    def find_all(self) -> list[TaskResponse]:
        return [TaskResponse.from_entity(task) for task in self._task_repo.list_all()]

    def find_by_user(self, user_id: int) -> list[TaskResponse]:
        return [
            TaskResponse.from_entity(task)
            for task in self._task_repo.list_by_user(user_id)
        ]

    def get(self, task_id: int) -> TaskResponse:
        return TaskResponse.from_entity(self._load(task_id))

    def create(self, request: TaskCreateRequest) -> TaskResponse:
        """Create a task owned by ``request.user_id``.

        Raises:
            InvalidInputError: if the user id is not positive.
            NotFoundError: if the owning user does not exist.
        """
        if request.user_id <= 0:
            raise InvalidInputError("User id must be greater than 0")
        if not self._user_repo.exists(request.user_id):
            logger.warning("Task for missing user {}", request.user_id)
            raise user_not_found(request.user_id)

        saved = self._task_repo.save(request.to_entity())
        logger.info("Created task {} for user {}", saved.id, saved.user_id)
        return TaskResponse.from_entity(saved)

    def update(self, task_id: int, request: TaskUpdateRequest) -> TaskResponse:
        task = self._load(task_id)
        changes = request.changes()
        for field, value in changes.items():
            setattr(task, field, value)

        saved = self._task_repo.save(task)
        logger.info("Updated task {} fields {}", task_id, sorted(changes))
        return TaskResponse.from_entity(saved)

    def delete(self, task_id: int) -> None:
        if not self._task_repo.exists(task_id):
            raise task_not_found(task_id)
        self._task_repo.delete(task_id)
        logger.info("Deleted task {}", task_id)

    def _load(self, task_id: int) -> Task:
        task = self._task_repo.get(task_id)
        if task is None:
            raise task_not_found(task_id)
        return task
