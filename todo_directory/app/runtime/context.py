"""Process configuration held in a context variable.

The active ``ConfigData`` is loaded once from ``config.yaml`` and can be
swapped for a block of code with ``with_context``. Overrides only replace
the fields they set explicitly, at any nesting depth.
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from todo_directory.app.runtime.config.config_data import ConfigData
from todo_directory.app.runtime.config.config_template import load_config
from todo_directory.app.runtime.config.settings import EnvironmentVariables


@dataclass
class AppContext:
    config: ConfigData


_app_context: ContextVar[AppContext] = ContextVar(
    "app_context",
    default=AppContext(config=load_config(Path(EnvironmentVariables().config_path))),
)


def get_context() -> AppContext:
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    return _app_context.set(context)


def _explicit_fields(model: BaseModel) -> dict[str, Any]:
    """Collect the fields set on ``model`` by its caller, section by section."""
    fields = {}
    for name in model.model_fields_set:
        value = getattr(model, name)
        fields[name] = _explicit_fields(value) if isinstance(value, BaseModel) else value
    return fields


def _overlay(base: BaseModel, fields: dict[str, Any]) -> BaseModel:
    update = {}
    for name, value in fields.items():
        current = getattr(base, name)
        if isinstance(current, BaseModel) and isinstance(value, dict):
            update[name] = _overlay(current, value)
        else:
            update[name] = value
    return base.model_copy(update=update)


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Run a block with ``config_override`` laid over the current config.

    Example:
        with with_context(ConfigData(cache=CacheConfig(backend="redis"))):
            assert get_config().cache.backend == "redis"
    """
    if config_override is None:
        yield
        return
    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData or None, got {type(config_override)}"
        )

    merged = _overlay(get_config(), _explicit_fields(config_override))
    token = set_context(replace(get_context(), config=merged))
    try:
        yield
    finally:
        _app_context.reset(token)


def set_config(config: ConfigData) -> None:
    """Replace the configuration of the current context."""
    set_context(replace(get_context(), config=config))


def get_config() -> ConfigData:
    return get_context().config
