"""Redis connection service for managing Redis client lifecycle and health checks."""

import redis
from loguru import logger
from redis.backoff import ExponentialBackoff
from redis.retry import Retry

from todo_directory.app.runtime.config.config_data import RedisConfig
from todo_directory.app.runtime.context import get_config


class RedisService:
    """Owns the process-wide Redis client.

    Follows the same pattern as DbSessionService: constructed once from
    configuration and handed to the components that need a client.
    """

    def __init__(self, redis_config: RedisConfig | None = None):
        logger.info("Setting up Redis service")
        redis_config = redis_config or get_config().redis

        self._enabled = redis_config.enabled
        self._client: redis.Redis | None = None
        self._url = redis_config.url

        if not self._enabled:
            logger.info("Redis is disabled, service will not connect")
            return

        if not self._url:
            logger.warning("Redis URL not configured, service will not connect")
            self._enabled = False
            return

        logger.info(
            "Initializing Redis client with connection string: {}",
            redis_config.sanitized_connection_string,
        )
        retry = Retry(ExponentialBackoff(base=1, cap=10), retries=6)
        self._client = redis.Redis.from_url(
            redis_config.connection_string,
            encoding="utf-8",
            decode_responses=redis_config.decode_responses,
            max_connections=redis_config.max_connections,
            socket_timeout=redis_config.socket_timeout,
            socket_connect_timeout=redis_config.socket_connect_timeout,
            health_check_interval=30,
            retry=retry,
            client_name="todo_directory",
        )

    def get_client(self) -> redis.Redis | None:
        """Return the client, or None when Redis is disabled."""
        if not self._enabled or self._client is None:
            logger.debug("Redis is not available, returning None")
            return None
        return self._client

    def health_check(self) -> bool:
        if self._client is None:
            return False
        try:
            return bool(self._client.ping())
        except redis.RedisError as e:
            logger.error("Redis health check failed: {}: {}", type(e).__name__, e)
            return False

    def close(self) -> None:
        if self._client is None:
            return
        logger.info("Closing Redis connection")
        try:
            self._client.close()
        finally:
            self._client = None

    @property
    def is_enabled(self) -> bool:
        return self._enabled
