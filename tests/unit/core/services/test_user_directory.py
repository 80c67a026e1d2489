"""Unit tests for UserDirectoryService."""

from unittest.mock import Mock

import pytest

from todo_directory.app.core.exceptions import AlreadyExistsError, NotFoundError
from todo_directory.app.core.models.user import UserCreateRequest, UserUpdateRequest
from todo_directory.app.core.services.user.user_directory import UserDirectoryService
from todo_directory.app.core.storage.read_model_cache import InMemoryReadModelCache
from todo_directory.app.entities.core.group import Group
from todo_directory.app.entities.core.task import Task


class RecordingCache(InMemoryReadModelCache):
    """Records whether the user still existed in the store at removal time."""

    def __init__(self, user_repo):
        super().__init__()
        self._user_repo = user_repo
        self.removed_while_stored: list[bool] = []

    def remove(self, user_id: int) -> None:
        self.removed_while_stored.append(self._user_repo.exists(user_id))
        super().remove(user_id)


class TestGet:
    def test_cache_hit_skips_store(self, user_repo, coordinator, user_request_factory):
        repo = Mock(wraps=user_repo)
        cache = InMemoryReadModelCache()
        service = UserDirectoryService(repo, cache, coordinator)
        created = service.create(user_request_factory(1))

        result = service.get(created.id)

        assert result == created
        repo.get.assert_not_called()

    def test_cache_miss_loads_and_populates(
        self, user_repo, coordinator, user_request_factory
    ):
        repo = Mock(wraps=user_repo)
        cache = InMemoryReadModelCache()
        service = UserDirectoryService(repo, cache, coordinator)
        created = service.create(user_request_factory(1))
        cache.clear()

        first = service.get(created.id)
        second = service.get(created.id)

        assert first == second == created
        assert repo.get.call_count == 1
        assert created.id in cache

    def test_missing_user_raises_not_found(self, user_service, read_model_cache):
        with pytest.raises(NotFoundError, match="User with id 42 not found"):
            user_service.get(42)

        assert len(read_model_cache) == 0


class TestCreate:
    def test_create_persists_and_caches(self, user_service, user_repo, read_model_cache):
        request = UserCreateRequest(
            first_name="Ada", last_name="Lovelace", email="a@x.com", phone="+1"
        )

        result = user_service.create(request)

        assert result.id == 1
        assert result.email == "a@x.com"
        assert read_model_cache.get(1) == result
        assert user_repo.exists(1)

    def test_duplicate_email_does_not_save_or_cache(
        self, user_repo, coordinator, user_request_factory
    ):
        service = UserDirectoryService(user_repo, InMemoryReadModelCache(), coordinator)
        service.create(user_request_factory(1))

        repo = Mock(wraps=user_repo)
        cache = Mock(spec=InMemoryReadModelCache)
        guarded = UserDirectoryService(repo, cache, coordinator)

        with pytest.raises(AlreadyExistsError, match="same email/phone"):
            guarded.create(user_request_factory(2, email="user1@example.com"))

        repo.save.assert_not_called()
        cache.put.assert_not_called()

    def test_duplicate_phone_is_rejected(self, user_service, user_request_factory):
        user_service.create(user_request_factory(1))

        with pytest.raises(AlreadyExistsError):
            user_service.create(user_request_factory(2, phone="+15550000001"))


class TestCreateMany:
    def test_creates_every_user(self, user_service, read_model_cache, user_request_factory):
        results = user_service.create_many([user_request_factory(i) for i in range(1, 4)])

        assert [user.id for user in results] == [1, 2, 3]
        assert len(read_model_cache) == 3

    def test_duplicate_within_batch_saves_nothing(
        self, user_service, read_model_cache, user_request_factory
    ):
        batch = [
            user_request_factory(1),
            user_request_factory(2, email="user1@example.com"),
        ]

        with pytest.raises(AlreadyExistsError):
            user_service.create_many(batch)

        assert user_service.find_all() == []
        assert len(read_model_cache) == 0

    def test_collision_with_store_saves_nothing(self, user_service, user_request_factory):
        user_service.create(user_request_factory(1))

        with pytest.raises(AlreadyExistsError):
            user_service.create_many(
                [user_request_factory(2), user_request_factory(3, phone="+15550000001")]
            )

        assert len(user_service.find_all()) == 1


class TestUpdate:
    def test_partial_update_keeps_other_fields(
        self, user_service, user_request_factory
    ):
        created = user_service.create(user_request_factory(1, first_name="A", last_name="B"))

        updated = user_service.update(created.id, UserUpdateRequest(last_name="C"))

        assert updated.first_name == "A"
        assert updated.last_name == "C"
        assert updated.email == created.email

    def test_update_refreshes_cache_without_store_read(
        self, user_repo, coordinator, user_request_factory
    ):
        repo = Mock(wraps=user_repo)
        service = UserDirectoryService(repo, InMemoryReadModelCache(), coordinator)
        created = service.create(user_request_factory(1))
        service.update(created.id, UserUpdateRequest(first_name="Renamed"))
        repo.get.reset_mock()

        result = service.get(created.id)

        assert result.first_name == "Renamed"
        repo.get.assert_not_called()

    def test_update_to_foreign_email_is_rejected(
        self, user_service, read_model_cache, user_request_factory
    ):
        first = user_service.create(user_request_factory(1))
        second = user_service.create(user_request_factory(2))

        with pytest.raises(AlreadyExistsError):
            user_service.update(second.id, UserUpdateRequest(email=first.email))

        assert read_model_cache.get(second.id) == second

    def test_update_to_own_email_is_allowed(self, user_service, user_request_factory):
        created = user_service.create(user_request_factory(1))

        updated = user_service.update(
            created.id, UserUpdateRequest(email=created.email, first_name="Same")
        )

        assert updated.first_name == "Same"

    def test_update_missing_user(self, user_service):
        with pytest.raises(NotFoundError):
            user_service.update(5, UserUpdateRequest(first_name="X"))


class TestDelete:
    def test_delete_removes_cache_after_store(
        self, user_repo, coordinator, user_request_factory
    ):
        cache = RecordingCache(user_repo)
        service = UserDirectoryService(user_repo, cache, coordinator)
        created = service.create(user_request_factory(1))

        service.delete(created.id)

        assert cache.removed_while_stored == [False]
        assert created.id not in cache
        with pytest.raises(NotFoundError):
            service.get(created.id)

    def test_delete_cascades_memberships_and_tasks(
        self, user_service, group_repo, task_repo, user_request_factory
    ):
        ada = user_service.create(user_request_factory(1))
        grace = user_service.create(user_request_factory(2))
        team = group_repo.save(Group(name="Team"))
        user_service.add_to_group(ada.id, team.id)
        user_service.add_to_group(grace.id, team.id)
        task_repo.save(Task(title="Owned", user_id=ada.id))

        user_service.delete(ada.id)

        assert group_repo.get(team.id).user_ids == {grace.id}
        assert task_repo.list_by_user(ada.id) == []

    def test_delete_missing_user_leaves_cache(self, user_service, read_model_cache):
        with pytest.raises(NotFoundError):
            user_service.delete(3)

        assert len(read_model_cache) == 0


class TestMembershipDelegation:
    def test_add_and_list_by_group(self, user_service, group_repo, user_request_factory):
        ada = user_service.create(user_request_factory(1))
        user_service.create(user_request_factory(2))
        team = group_repo.save(Group(name="Team"))

        user_service.add_to_group(ada.id, team.id)

        assert user_service.list_by_group("Team") == [ada]

    def test_remove_from_group(self, user_service, group_repo, user_request_factory):
        ada = user_service.create(user_request_factory(1))
        team = group_repo.save(Group(name="Team"))
        user_service.add_to_group(ada.id, team.id)

        user_service.remove_from_group(ada.id, team.id)

        assert user_service.list_by_group("Team") == []

    def test_unknown_group_lists_empty(self, user_service):
        assert user_service.list_by_group("Nobody") == []

    def test_not_found_propagates(self, user_service, user_request_factory):
        ada = user_service.create(user_request_factory(1))

        with pytest.raises(NotFoundError, match="Group with id 4 not found"):
            user_service.add_to_group(ada.id, 4)

    def test_delegates_to_coordinator(self, user_repo, read_model_cache):
        coordinator = Mock()
        service = UserDirectoryService(user_repo, read_model_cache, coordinator)

        service.add_to_group(1, 2)
        service.remove_from_group(1, 2)

        coordinator.add_membership.assert_called_once_with(1, 2)
        coordinator.remove_membership.assert_called_once_with(1, 2)
