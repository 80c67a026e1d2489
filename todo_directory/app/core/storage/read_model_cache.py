"""User read-model cache interface and implementations.

The cache maps a user id to the ``UserResponse`` snapshot taken at the
last successful write. Entries are only created, overwritten or removed
explicitly; there is no expiry.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod

import redis
from loguru import logger

from todo_directory.app.core.models.user import UserResponse
from todo_directory.app.runtime.config.config_data import CacheConfig


class ReadModelCache(ABC):
    """Abstract interface for user read-model cache backends."""

    @abstractmethod
    def get(self, user_id: int) -> UserResponse | None:
        """Return the cached snapshot for ``user_id``, or None on a miss."""

    @abstractmethod
    def put(self, user_id: int, read_model: UserResponse) -> None:
        """Store or overwrite the snapshot for ``user_id``."""

    @abstractmethod
    def remove(self, user_id: int) -> None:
        """Drop the snapshot for ``user_id``. Missing keys are ignored."""

    @abstractmethod
    def clear(self) -> None:
        """Drop every snapshot."""

    @abstractmethod
    def __len__(self) -> int:
        pass

    def __contains__(self, user_id: object) -> bool:
        return isinstance(user_id, int) and self.get(user_id) is not None


class InMemoryReadModelCache(ReadModelCache):
    """Process-local cache guarded by a lock for concurrent requests."""

    def __init__(self):
        self._data: dict[int, UserResponse] = {}
        self._lock = threading.RLock()

    def get(self, user_id: int) -> UserResponse | None:
        with self._lock:
            return self._data.get(user_id)

    def put(self, user_id: int, read_model: UserResponse) -> None:
        # UserResponse is frozen, so storing it keeps a value copy
        with self._lock:
            self._data[user_id] = read_model

    def remove(self, user_id: int) -> None:
        with self._lock:
            self._data.pop(user_id, None)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


class RedisReadModelCache(ReadModelCache):
    """Redis-backed cache storing snapshots as JSON under a key prefix."""

    def __init__(self, redis_client: redis.Redis, key_prefix: str = "todo:user:"):
        self._redis = redis_client
        self._prefix = key_prefix

    def _key(self, user_id: int) -> str:
        return f"{self._prefix}{user_id}"

    def get(self, user_id: int) -> UserResponse | None:
        try:
            data = self._redis.get(self._key(user_id))
        except redis.RedisError as e:
            raise RuntimeError(f"Redis get failed: {e}") from e
        if data is None:
            return None
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        return UserResponse.model_validate_json(data)

    def put(self, user_id: int, read_model: UserResponse) -> None:
        try:
            self._redis.set(self._key(user_id), read_model.model_dump_json())
        except redis.RedisError as e:
            raise RuntimeError(f"Redis set failed: {e}") from e

    def remove(self, user_id: int) -> None:
        try:
            self._redis.delete(self._key(user_id))
        except redis.RedisError as e:
            raise RuntimeError(f"Redis delete failed: {e}") from e

    def _keys(self) -> list[str]:
        return list(self._redis.scan_iter(match=f"{self._prefix}*", count=100))

    def clear(self) -> None:
        try:
            keys = self._keys()
            if keys:
                self._redis.delete(*keys)
        except redis.RedisError as e:
            raise RuntimeError(f"Redis clear failed: {e}") from e

    def __len__(self) -> int:
        try:
            return len(self._keys())
        except redis.RedisError as e:
            raise RuntimeError(f"Redis scan failed: {e}") from e


def build_read_model_cache(
    cache_config: CacheConfig, redis_client: redis.Redis | None = None
) -> ReadModelCache:
    """Create the cache backend selected by ``cache_config``."""
    if cache_config.backend == "redis":
        if redis_client is None:
            raise ValueError("Redis cache backend selected but Redis is not configured")
        logger.info("User read-model cache: redis (prefix {})", cache_config.key_prefix)
        return RedisReadModelCache(redis_client, cache_config.key_prefix)

    logger.info("User read-model cache: in-memory")
    return InMemoryReadModelCache()
