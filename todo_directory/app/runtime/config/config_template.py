"""Loading of ``config.yaml`` with environment variable placeholders."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic_core import ValidationError

from todo_directory.app.runtime.config.config_data import ConfigData
from todo_directory.app.runtime.config.settings import EnvironmentVariables

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def _resolve(expression: str) -> str:
    if ":-" in expression:
        name, default = expression.split(":-", 1)
        return os.getenv(name, default)

    name, _, message = expression.partition(":?")
    value = os.getenv(name)
    if value is None:
        if message:
            raise ValueError(f"Required environment variable {name}: {message}")
        raise ValueError(f"Required environment variable {name} not set")
    return value


def substitute_env_vars(text: str) -> str:
    """Replace ``${...}`` placeholders in ``text``.

    ``${NAME}`` must be set, ``${NAME:-default}`` falls back to ``default``
    and ``${NAME:?message}`` fails with ``message`` when unset.
    """
    return _PLACEHOLDER.sub(lambda match: _resolve(match.group(1)), text)


def apply_environment_overrides(env_mode: str) -> list[str]:
    """Copy ``<ENV>_NAME`` variables onto ``NAME`` for the active environment.

    Returns the names of the variables that were set.
    """
    prefix = f"{env_mode.upper()}_"
    overrides = {
        name[len(prefix):]: value
        for name, value in os.environ.items()
        if name.startswith(prefix)
    }
    os.environ.update(overrides)
    return sorted(overrides)


def load_templated_yaml(file_path: Path) -> ConfigData:
    """Read the ``config`` section of ``file_path`` into ``ConfigData``.

    Raises:
        ValueError: if a required variable is unset, the YAML is empty or
            malformed, or the content does not validate.
        FileNotFoundError: if the file does not exist.
    """
    content = file_path.read_text()

    env_mode = EnvironmentVariables().app_environment
    applied = apply_environment_overrides(env_mode)
    logger.info("Loading configuration {} for environment {}", file_path, env_mode)
    if applied:
        logger.debug("Environment overrides applied: {}", applied)

    try:
        loaded = yaml.safe_load(substitute_env_vars(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e
    if not loaded:
        raise ValueError(f"Configuration file {file_path} is empty")

    try:
        config = ConfigData(**loaded.get("config", {}))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    if config.cache.backend == "redis" and not config.redis.enabled:
        raise ValueError("Invalid configuration: the redis cache backend needs redis.enabled")
    return config


def load_config(file_path: Path) -> ConfigData:
    """Load ``file_path`` if present, otherwise fall back to model defaults."""
    if not file_path.exists():
        logger.debug("{} not found, using default configuration", file_path)
        return ConfigData()
    return load_templated_yaml(file_path)
