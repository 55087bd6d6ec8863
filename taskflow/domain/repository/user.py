"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from taskflow.domain.model.user import User
from taskflow.domain.value import Email, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations must enforce uniqueness of email and google_id.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their (normalized) email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_google_id(self, google_id: str) -> Optional[User]:
        """Find a user by their Google subject identifier.

        Args:
            google_id: Google account ID

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to insert

        Returns:
            The created user

        Raises:
            DuplicateKeyError: If email or google_id is already taken
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Replace an existing user by ID.

        Args:
            user: The user with updated fields

        Returns:
            The updated user

        Raises:
            NotFoundError: If no user has this ID
            DuplicateKeyError: If the new google_id belongs to another user
        """
        pass
