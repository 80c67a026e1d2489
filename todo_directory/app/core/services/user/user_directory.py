"""User directory service with a write-through read-model cache."""

from collections.abc import Sequence

from loguru import logger

from todo_directory.app.core.exceptions import AlreadyExistsError, user_not_found
from todo_directory.app.core.models.user import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)
from todo_directory.app.core.services.membership.relationship_coordinator import (
    RelationshipCoordinator,
)
from todo_directory.app.core.storage.read_model_cache import ReadModelCache
from todo_directory.app.entities.core.user.entity import User
from todo_directory.app.entities.core.user.repository import UserRepository

_DUPLICATE_MESSAGE = "User with the same email/phone already exists"


class UserDirectoryService:
    """User CRUD with cache-first reads.

    Every successful write refreshes the cache entry for the written user in
    the same call, after the store accepted the write. Deletes drop the
    entry only after the store deletion succeeded.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        cache: ReadModelCache,
        coordinator: RelationshipCoordinator,
    ):
        self._user_repo = user_repo
        self._cache = cache
        self._coordinator = coordinator

    def find_all(self) -> list[UserResponse]:
        return [UserResponse.from_entity(user) for user in self._user_repo.list_all()]

    def get(self, user_id: int) -> UserResponse:
        """Return the read-model for ``user_id``, consulting the cache first.

        Raises:
            NotFoundError: if the user does not exist.
        """
        cached = self._cache.get(user_id)
        if cached is not None:
            logger.debug("Cache hit for user {}", user_id)
            return cached

        logger.debug("Cache miss for user {}", user_id)
        user = self._load(user_id)
        read_model = UserResponse.from_entity(user)
        self._cache.put(user_id, read_model)
        return read_model

    def create(self, request: UserCreateRequest) -> UserResponse:
        """Create a user after checking email and phone are unused.

        Raises:
            AlreadyExistsError: if the email or phone belongs to another user.
        """
        self._ensure_unique(request.email, request.phone)
        return self._persist_new(request.to_entity())

    def create_many(self, requests: Sequence[UserCreateRequest]) -> list[UserResponse]:
        """Create several users, validating all of them before saving any."""
        seen_emails: set[str] = set()
        seen_phones: set[str] = set()
        for request in requests:
            if request.email in seen_emails or request.phone in seen_phones:
                logger.warning("Duplicate email/phone within batch: {}", request.email)
                raise AlreadyExistsError(_DUPLICATE_MESSAGE)
            self._ensure_unique(request.email, request.phone)
            seen_emails.add(request.email)
            seen_phones.add(request.phone)

        return [self._persist_new(request.to_entity()) for request in requests]

    def update(self, user_id: int, request: UserUpdateRequest) -> UserResponse:
        """Apply the fields present in ``request`` and refresh the cache.

        Raises:
            NotFoundError: if the user does not exist.
            AlreadyExistsError: if a new email or phone belongs to another user.
        """
        user = self._load(user_id)
        changes = request.changes()

        email = changes.get("email")
        if email is not None and email != user.email and self._user_repo.exists_by_email(email):
            logger.warning("Update of user {} collides on email", user_id)
            raise AlreadyExistsError(_DUPLICATE_MESSAGE)
        phone = changes.get("phone")
        if phone is not None and phone != user.phone and self._user_repo.exists_by_phone(phone):
            logger.warning("Update of user {} collides on phone", user_id)
            raise AlreadyExistsError(_DUPLICATE_MESSAGE)

        for field, value in changes.items():
            setattr(user, field, value)

        saved = self._user_repo.save(user)
        read_model = UserResponse.from_entity(saved)
        self._cache.put(user_id, read_model)
        logger.info("Updated user {} fields {}", user_id, sorted(changes))
        return read_model

    def delete(self, user_id: int) -> None:
        """Delete a user after detaching it from all of its groups.

        Raises:
            NotFoundError: if the user does not exist.
        """
        user = self._load(user_id)
        self._coordinator.cascade_on_user_delete(user)
        self._user_repo.delete(user_id)
        self._cache.remove(user_id)
        logger.info("Deleted user {}", user_id)

    def add_to_group(self, user_id: int, group_id: int) -> None:
        self._coordinator.add_membership(user_id, group_id)

    def remove_from_group(self, user_id: int, group_id: int) -> None:
        self._coordinator.remove_membership(user_id, group_id)

    def list_by_group(self, group_name: str) -> list[UserResponse]:
        """Members of the named group; empty for unknown or empty groups."""
        return [
            UserResponse.from_entity(user)
            for user in self._user_repo.list_by_group_name(group_name)
        ]

    def _load(self, user_id: int) -> User:
        user = self._user_repo.get(user_id)
        if user is None:
            logger.warning("User {} not found", user_id)
            raise user_not_found(user_id)
        return user

    def _ensure_unique(self, email: str, phone: str) -> None:
        if self._user_repo.exists_by_email(email) or self._user_repo.exists_by_phone(phone):
            logger.warning("Rejected user with existing email/phone: {}", email)
            raise AlreadyExistsError(_DUPLICATE_MESSAGE)

    def _persist_new(self, user: User) -> UserResponse:
        saved = self._user_repo.save(user)
        read_model = UserResponse.from_entity(saved)
        self._cache.put(read_model.id, read_model)
        logger.info("Created user {}", read_model.id)
        return read_model
