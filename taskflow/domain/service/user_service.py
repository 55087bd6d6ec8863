"""User domain service."""

import logfire

from taskflow.domain.error import NotFoundError
from taskflow.domain.model import User
from taskflow.domain.repository import UserRepository
from taskflow.domain.value import Email, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_user_by_email(self, email: Email) -> User | None:
        """Get user by normalized email.

        Args:
            email: User email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_email"):
            user = await self.user_repository.find_by_email(email)
            if user:
                logfire.info("User found by email", user_id=str(user.id))
            return user

    async def get_user_by_google_id(self, google_id: str) -> User | None:
        """Get user by Google account ID.

        Args:
            google_id: Google subject identifier

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_google_id"):
            user = await self.user_repository.find_by_google_id(google_id)
            if user:
                logfire.info("User found by Google ID", user_id=str(user.id))
            return user

    async def create(self, user: User) -> User:
        """Create a new user.

        Args:
            user: User to insert

        Returns:
            Created user

        Raises:
            DuplicateKeyError: If email or Google ID is already taken
        """
        with logfire.span(
            "user_service.create", user_id=str(user.id), provider=user.provider.value
        ):
            created = await self.user_repository.create(user)
            logfire.info(
                "User created", user_id=str(created.id), provider=created.provider.value
            )
            return created

    async def update(self, user: User) -> User:
        """Persist changes to an existing user.

        Args:
            user: User with updated fields

        Returns:
            Updated user
        """
        with logfire.span("user_service.update", user_id=str(user.id)):
            updated = await self.user_repository.update(user)
            logfire.info("User updated", user_id=str(updated.id))
            return updated
