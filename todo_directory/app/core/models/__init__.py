"""Request and response value types exchanged with the directory services."""

from .group import GroupCreateRequest, GroupResponse, GroupUpdateRequest
from .task import TaskCreateRequest, TaskResponse, TaskUpdateRequest
from .user import UserCreateRequest, UserResponse, UserUpdateRequest

__all__ = [
    "UserCreateRequest",
    "UserUpdateRequest",
    "UserResponse",
    "GroupCreateRequest",
    "GroupUpdateRequest",
    "GroupResponse",
    "TaskCreateRequest",
    "TaskUpdateRequest",
    "TaskResponse",
]
