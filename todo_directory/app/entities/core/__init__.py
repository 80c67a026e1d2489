"""Core directory entities.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer (the entity store)

Membership between users and groups is kept as an edge table in
``membership`` rather than on either entity's row.
"""

from .group import Group, GroupRepository, GroupTable
from .membership import UserGroupLinkTable
from .task import Task, TaskRepository, TaskTable
from .user import User, UserRepository, UserTable

__all__ = [
    "User",
    "UserTable",
    "UserRepository",
    "Group",
    "GroupTable",
    "GroupRepository",
    "Task",
    "TaskTable",
    "TaskRepository",
    "UserGroupLinkTable",
]
