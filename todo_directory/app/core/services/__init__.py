"""Core services exports."""

# Database Service
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

# Directory Services
from .group.group_directory import GroupDirectoryService
from .membership.relationship_coordinator import RelationshipCoordinator
from .redis_service import RedisService
from .task.task_service import TaskService
from .user.user_directory import UserDirectoryService

__all__ = [
    # Directory Services
    "RelationshipCoordinator",
    "UserDirectoryService",
    "GroupDirectoryService",
    "TaskService",
    # Infrastructure Services
    "DbManageService",
    "DbSessionService",
    "RedisService",
]
