"""Typed failures raised by the directory core.

Every failure is raised where it is detected and propagates unchanged to
the caller. None of them is retryable.
"""


class DirectoryError(Exception):
    """Base class for all directory failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DirectoryError):
    """A requested identifier or name has no corresponding record."""


class AlreadyExistsError(DirectoryError):
    """A write would violate a uniqueness constraint."""


class InvalidInputError(DirectoryError):
    """A request value fails a precondition before any lookup."""


def user_not_found(user_id: int) -> NotFoundError:
    return NotFoundError(f"User with id {user_id} not found")


def group_not_found(group_id: int) -> NotFoundError:
    return NotFoundError(f"Group with id {group_id} not found")


def group_name_not_found(name: str) -> NotFoundError:
    return NotFoundError(f"Group with name {name} not found")


def task_not_found(task_id: int) -> NotFoundError:
    return NotFoundError(f"Task with id {task_id} not found")
