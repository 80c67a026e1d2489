"""Wiring of repositories, cache and services.

``ApplicationDependencies`` holds the process-wide pieces (engine, Redis
client, read-model cache). ``unit_of_work`` hands out a fresh set of
directory services bound to one database session; the session commits and
the cache changes made through those services are published together when
the block exits cleanly.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from loguru import logger
from sqlmodel import Session

from todo_directory.app.core.models.user import UserResponse
from todo_directory.app.core.services.database.db_manage import DbManageService
from todo_directory.app.core.services.database.db_session import DbSessionService
from todo_directory.app.core.services.group.group_directory import GroupDirectoryService
from todo_directory.app.core.services.membership.relationship_coordinator import (
    RelationshipCoordinator,
)
from todo_directory.app.core.services.redis_service import RedisService
from todo_directory.app.core.services.task.task_service import TaskService
from todo_directory.app.core.services.user.user_directory import UserDirectoryService
from todo_directory.app.core.storage.read_model_cache import (
    ReadModelCache,
    build_read_model_cache,
)
from todo_directory.app.entities.core.group.repository import GroupRepository
from todo_directory.app.entities.core.task.repository import TaskRepository
from todo_directory.app.entities.core.user.repository import UserRepository
from todo_directory.app.runtime.config.config_data import ConfigData
from todo_directory.app.runtime.context import get_config

_REMOVED = object()


class PendingReadModelCache(ReadModelCache):
    """Buffers cache writes until the owning transaction commits.

    Reads see the buffered changes first, so a unit of work observes its
    own writes. ``publish`` applies them to the shared backend; ``discard``
    drops them after a rollback.
    """

    def __init__(self, backend: ReadModelCache):
        self._backend = backend
        self._pending: dict[int, object] = {}

    def get(self, user_id: int) -> UserResponse | None:
        if user_id in self._pending:
            value = self._pending[user_id]
            return None if value is _REMOVED else value
        return self._backend.get(user_id)

    def put(self, user_id: int, read_model: UserResponse) -> None:
        self._pending[user_id] = read_model

    def remove(self, user_id: int) -> None:
        self._pending[user_id] = _REMOVED

    def clear(self) -> None:
        self._pending.clear()
        self._backend.clear()

    def __len__(self) -> int:
        return len(self._backend)

    def publish(self) -> None:
        for user_id, value in self._pending.items():
            if value is _REMOVED:
                self._backend.remove(user_id)
            else:
                self._backend.put(user_id, value)
        self._pending.clear()

    def discard(self) -> None:
        self._pending.clear()


@dataclass
class DirectoryServices:
    """The directory services for a single unit of work."""

    users: UserDirectoryService
    groups: GroupDirectoryService
    tasks: TaskService
    memberships: RelationshipCoordinator

    @classmethod
    def for_session(cls, session: Session, cache: ReadModelCache) -> DirectoryServices:
        user_repo = UserRepository(session)
        group_repo = GroupRepository(session)
        task_repo = TaskRepository(session)
        coordinator = RelationshipCoordinator(user_repo, group_repo)
        return cls(
            users=UserDirectoryService(user_repo, cache, coordinator),
            groups=GroupDirectoryService(group_repo, coordinator),
            tasks=TaskService(task_repo, user_repo),
            memberships=coordinator,
        )


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    redis_service: RedisService
    read_model_cache: ReadModelCache

    @classmethod
    def from_config(cls, config: ConfigData | None = None) -> ApplicationDependencies:
        config = config or get_config()
        database_service = DbSessionService(config.database)
        redis_service = RedisService(config.redis)
        cache = build_read_model_cache(config.cache, redis_service.get_client())
        return cls(
            database_service=database_service,
            redis_service=redis_service,
            read_model_cache=cache,
        )

    def init_db(self) -> None:
        DbManageService(self.database_service.engine).create_all()

    @contextmanager
    def unit_of_work(self) -> Iterator[DirectoryServices]:
        cache = PendingReadModelCache(self.read_model_cache)
        try:
            with self.database_service.session_scope() as session:
                yield DirectoryServices.for_session(session, cache)
        except Exception:
            cache.discard()
            raise
        cache.publish()
        logger.debug("Unit of work committed")

    def close(self) -> None:
        self.redis_service.close()
        self.database_service.dispose()
