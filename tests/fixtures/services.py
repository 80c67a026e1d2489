from __future__ import annotations

from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from todo_directory.app.core.models.group import GroupCreateRequest
from todo_directory.app.core.models.user import UserCreateRequest
from todo_directory.app.core.services.group.group_directory import GroupDirectoryService
from todo_directory.app.core.services.membership.relationship_coordinator import (
    RelationshipCoordinator,
)
from todo_directory.app.core.services.task.task_service import TaskService
from todo_directory.app.core.services.user.user_directory import UserDirectoryService
from todo_directory.app.core.storage.read_model_cache import InMemoryReadModelCache
from todo_directory.app.entities.core.group.repository import GroupRepository
from todo_directory.app.entities.core.task.repository import TaskRepository
from todo_directory.app.entities.core.user.repository import UserRepository
from todo_directory.app.runtime.config.config_data import (
    CacheConfig,
    ConfigData,
    DatabaseConfig,
    RedisConfig,
)
from todo_directory.app.runtime.container import ApplicationDependencies

__all__ = [
    "read_model_cache",
    "coordinator",
    "user_service",
    "group_service",
    "task_service",
    "user_request_factory",
    "group_request_factory",
    "file_config",
    "app_dependencies",
]


@pytest.fixture
def read_model_cache() -> InMemoryReadModelCache:
    return InMemoryReadModelCache()


@pytest.fixture
def coordinator(
    user_repo: UserRepository, group_repo: GroupRepository
) -> RelationshipCoordinator:
    return RelationshipCoordinator(user_repo, group_repo)


@pytest.fixture
def user_service(
    user_repo: UserRepository,
    read_model_cache: InMemoryReadModelCache,
    coordinator: RelationshipCoordinator,
) -> UserDirectoryService:
    return UserDirectoryService(user_repo, read_model_cache, coordinator)


@pytest.fixture
def group_service(
    group_repo: GroupRepository, coordinator: RelationshipCoordinator
) -> GroupDirectoryService:
    return GroupDirectoryService(group_repo, coordinator)


@pytest.fixture
def task_service(task_repo: TaskRepository, user_repo: UserRepository) -> TaskService:
    return TaskService(task_repo, user_repo)


@pytest.fixture
def user_request_factory() -> Callable[..., UserCreateRequest]:
    """Build user requests with unique email and phone per index."""

    def _make(index: int = 1, **overrides: str) -> UserCreateRequest:
        data = {
            "first_name": f"First{index}",
            "last_name": f"Last{index}",
            "email": f"user{index}@example.com",
            "phone": f"+1555000{index:04d}",
        }
        data.update(overrides)
        return UserCreateRequest(**data)

    return _make


@pytest.fixture
def group_request_factory() -> Callable[..., GroupCreateRequest]:
    def _make(name: str = "Team", description: str | None = None) -> GroupCreateRequest:
        return GroupCreateRequest(name=name, description=description)

    return _make


@pytest.fixture
def file_config(tmp_path: Path) -> ConfigData:
    """Configuration pointing at a SQLite file under ``tmp_path``."""
    return ConfigData(
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'directory.db'}"),
        redis=RedisConfig(enabled=False),
        cache=CacheConfig(backend="memory"),
    )


@pytest.fixture
def app_dependencies(file_config: ConfigData) -> Generator[ApplicationDependencies]:
    dependencies = ApplicationDependencies.from_config(file_config)
    dependencies.init_db()
    try:
        yield dependencies
    finally:
        dependencies.close()
