from .group_directory import GroupDirectoryService

__all__ = ["GroupDirectoryService"]
