"""Test configuration and fixtures for todo-directory."""

from tests.fixtures import *  # noqa: F401,F403
