"""Pydantic models mirroring the ``config`` section of config.yaml."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, computed_field
from sqlalchemy.engine import make_url

Environment = Literal["development", "production", "test"]


class AppConfig(BaseModel):
    environment: Environment = Field(default="development", description="Deployment environment")
    name: str = Field(default="todo-directory", description="Name used in logs")


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Minimum level for every sink")
    format: Literal["json", "plain"] = Field(default="plain", description="File sink format")
    file: str | None = Field(default=None, description="Optional rotating log file")
    max_size_mb: int = Field(default=10, description="Rotate the file at this size")
    backup_count: int = Field(default=5, description="Rotated files kept")


class DatabaseConfig(BaseModel):
    """Where users, groups, memberships and tasks are stored.

    Outside production the password comes from the URL itself. In
    production it must come from ``password_file`` or the environment
    variable named by ``password_env_var``; SQLite needs neither.
    """

    url: str = Field(default="sqlite:///./todo_directory.db", description="SQLAlchemy URL")
    pool_size: int = Field(default=5, description="Pooled connections (not SQLite)")
    max_overflow: int = Field(default=10, description="Extra connections beyond the pool")
    pool_timeout: int = Field(default=30, description="Seconds to wait for a connection")
    pool_recycle: int = Field(default=1800, description="Seconds before a connection is recycled")
    echo: bool = Field(default=False, description="Log every SQL statement")
    environment_mode: Environment = Field(default="development")
    password_env_var: str | None = Field(default=None, description="Variable holding the password")
    password_file: str | None = Field(default=None, description="File holding the password")

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @computed_field
    @property
    def password(self) -> str | None:
        if self.environment_mode != "production":
            return make_url(self.url).password

        if self.password_file:
            try:
                return Path(self.password_file).read_text().strip()
            except OSError as e:
                raise ValueError("Failed to read database password from file.") from e
        if self.password_env_var:
            secret = os.getenv(self.password_env_var)
            if not secret:
                raise ValueError(f"Environment variable {self.password_env_var} not set")
            return secret
        if self.is_sqlite:
            return None
        raise ValueError("Production databases need password_file or password_env_var")

    @computed_field
    @property
    def connection_string(self) -> str:
        url = make_url(self.url)
        if self.is_sqlite:
            return str(url)

        if url.password and self.environment_mode == "production":
            logger.warning("Database URL embeds a password in production mode")
        secret = self.password
        if secret and secret != url.password:
            url = url.set(password=secret)
        return url.render_as_string(hide_password=False)


class RedisConfig(BaseModel):
    """Redis connection, used only by the redis cache backend."""

    enabled: bool = Field(default=False)
    url: str = Field(default="", description="redis:// URL")
    password: str | None = Field(default=None, description="Injected into the URL when set")
    decode_responses: bool = Field(default=True)
    socket_timeout: float = Field(default=2.0, description="Seconds per command")
    socket_connect_timeout: float = Field(default=2.0, description="Seconds to connect")
    max_connections: int = Field(default=20)

    @computed_field
    @property
    def connection_string(self) -> str:
        scheme, sep, rest = self.url.partition("://")
        if not self.password or not sep or "@" in rest:
            return self.url
        return f"{scheme}://:{self.password}@{rest}"

    @property
    def sanitized_connection_string(self) -> str:
        if not self.password:
            return self.connection_string
        return self.connection_string.replace(self.password, "***")


class CacheConfig(BaseModel):
    """User read-model cache."""

    backend: Literal["memory", "redis"] = Field(default="memory")
    key_prefix: str = Field(default="todo:user:", description="Redis key prefix")


class ConfigData(BaseModel):
    """Root of the ``config`` section."""

    app: AppConfig = Field(default_factory=AppConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    redis: RedisConfig = Field(default_factory=RedisConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
