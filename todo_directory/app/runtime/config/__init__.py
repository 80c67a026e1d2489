"""Configuration models and loaders."""

from .config_data import (
    AppConfig,
    CacheConfig,
    ConfigData,
    DatabaseConfig,
    LoggingConfig,
    RedisConfig,
)
from .config_template import load_config, load_templated_yaml, substitute_env_vars

__all__ = [
    "AppConfig",
    "CacheConfig",
    "ConfigData",
    "DatabaseConfig",
    "LoggingConfig",
    "RedisConfig",
    "load_config",
    "load_templated_yaml",
    "substitute_env_vars",
]
