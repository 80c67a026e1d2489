"""Unit tests for GroupDirectoryService."""

from unittest.mock import Mock

import pytest

from todo_directory.app.core.exceptions import AlreadyExistsError, NotFoundError
from todo_directory.app.core.models.group import GroupCreateRequest, GroupUpdateRequest
from todo_directory.app.core.services.group.group_directory import GroupDirectoryService


class TestGroupDirectoryService:
    def test_create_and_get(self, group_service, group_request_factory):
        created = group_service.create(group_request_factory("Team", "Core team"))

        assert created.id == 1
        assert group_service.get(created.id) == created
        assert group_service.get_by_name("Team") == created

    def test_duplicate_name_is_rejected(self, group_service, group_request_factory):
        group_service.create(group_request_factory("Team"))

        with pytest.raises(AlreadyExistsError, match="Group with name Team already exists"):
            group_service.create(group_request_factory("Team"))

        assert len(group_service.find_all()) == 1

    def test_get_missing(self, group_service):
        with pytest.raises(NotFoundError, match="Group with id 7 not found"):
            group_service.get(7)

    def test_get_by_missing_name(self, group_service):
        with pytest.raises(NotFoundError, match="Group with name Ghosts not found"):
            group_service.get_by_name("Ghosts")

    def test_partial_update(self, group_service):
        created = group_service.create(GroupCreateRequest(name="Team", description="Old"))

        renamed = group_service.update(created.id, GroupUpdateRequest(name="Crew"))
        described = group_service.update(created.id, GroupUpdateRequest(description="New"))

        assert renamed.name == "Crew"
        assert renamed.description == "Old"
        assert described.name == "Crew"
        assert described.description == "New"

    def test_update_keeps_members(self, group_service, user_service, user_request_factory):
        group = group_service.create(GroupCreateRequest(name="Team"))
        ada = user_service.create(user_request_factory(1))
        user_service.add_to_group(ada.id, group.id)

        updated = group_service.update(group.id, GroupUpdateRequest(description="Still here"))

        assert updated.user_ids == [ada.id]

    def test_response_lists_members_sorted(
        self, group_service, user_service, user_request_factory
    ):
        group = group_service.create(GroupCreateRequest(name="Team"))
        users = [user_service.create(user_request_factory(i)) for i in (1, 2, 3)]
        for user in reversed(users):
            user_service.add_to_group(user.id, group.id)

        assert group_service.get(group.id).user_ids == [1, 2, 3]

    def test_delete_detaches_members(
        self, group_service, user_service, user_repo, user_request_factory
    ):
        group = group_service.create(GroupCreateRequest(name="Team"))
        ada = user_service.create(user_request_factory(1))
        user_service.add_to_group(ada.id, group.id)

        group_service.delete(group.id)

        assert user_repo.get(ada.id).group_ids == set()
        assert user_service.get(ada.id) == ada
        with pytest.raises(NotFoundError):
            group_service.get(group.id)

    def test_delete_runs_cascade_before_removal(self, group_repo):
        coordinator = Mock()
        repo = Mock(wraps=group_repo)
        manager = Mock()
        manager.attach_mock(coordinator.cascade_on_group_delete, "cascade")
        manager.attach_mock(repo.delete, "delete")
        service = GroupDirectoryService(repo, coordinator)
        created = service.create(GroupCreateRequest(name="Team"))

        service.delete(created.id)

        assert [call[0] for call in manager.mock_calls] == ["cascade", "delete"]

    def test_delete_missing(self, group_service):
        with pytest.raises(NotFoundError):
            group_service.delete(12)
