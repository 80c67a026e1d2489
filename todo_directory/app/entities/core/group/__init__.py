"""Group entity package."""

from .entity import Group
from .repository import GroupRepository
from .table import GroupTable

__all__ = ["Group", "GroupRepository", "GroupTable"]
