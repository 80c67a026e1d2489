"""Unit tests for TaskService."""

from datetime import date
from unittest.mock import Mock

import pytest

from todo_directory.app.core.exceptions import InvalidInputError, NotFoundError
from todo_directory.app.core.models.task import TaskCreateRequest, TaskUpdateRequest
from todo_directory.app.core.services.task.task_service import TaskService


@pytest.fixture
def owner(user_service, user_request_factory):
    return user_service.create(user_request_factory(1))


class TestTaskService:
    def test_create_task(self, task_service, owner):
        task = task_service.create(
            TaskCreateRequest(title="Report", user_id=owner.id, deadline_date=date(2026, 5, 1))
        )

        assert task.id == 1
        assert task.user_id == owner.id
        assert task.deadline_date == date(2026, 5, 1)
        assert task_service.get(task.id) == task

    @pytest.mark.parametrize("user_id", [0, -3])
    def test_non_positive_user_id_rejected_before_lookup(self, task_repo, user_id):
        user_repo = Mock()
        service = TaskService(task_repo, user_repo)

        with pytest.raises(InvalidInputError, match="User id must be greater than 0"):
            service.create(TaskCreateRequest(title="Report", user_id=user_id))

        user_repo.exists.assert_not_called()

    def test_missing_owner(self, task_service):
        with pytest.raises(NotFoundError, match="User with id 8 not found"):
            task_service.create(TaskCreateRequest(title="Report", user_id=8))

    def test_partial_update(self, task_service, owner):
        task = task_service.create(
            TaskCreateRequest(title="Report", content="Draft", user_id=owner.id)
        )

        updated = task_service.update(task.id, TaskUpdateRequest(is_completed=True))

        assert updated.is_completed is True
        assert updated.title == "Report"
        assert updated.content == "Draft"

    def test_find_by_user(self, task_service, user_service, user_request_factory, owner):
        other = user_service.create(user_request_factory(2))
        task_service.create(TaskCreateRequest(title="Mine", user_id=owner.id))
        task_service.create(TaskCreateRequest(title="Theirs", user_id=other.id))

        assert [task.title for task in task_service.find_by_user(owner.id)] == ["Mine"]
        assert len(task_service.find_all()) == 2

    def test_delete(self, task_service, owner):
        task = task_service.create(TaskCreateRequest(title="Report", user_id=owner.id))

        task_service.delete(task.id)

        with pytest.raises(NotFoundError, match=f"Task with id {task.id} not found"):
            task_service.get(task.id)

    def test_delete_missing(self, task_service):
        with pytest.raises(NotFoundError, match="Task with id 4 not found"):
            task_service.delete(4)

    def test_update_missing(self, task_service):
        with pytest.raises(NotFoundError):
            task_service.update(4, TaskUpdateRequest(title="X"))
