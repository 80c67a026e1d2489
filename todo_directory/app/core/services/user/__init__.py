from .user_directory import UserDirectoryService

__all__ = ["UserDirectoryService"]
