"""In-memory user repository for testing."""

from typing import Optional

from taskflow.domain.error import DuplicateKeyError, NotFoundError
from taskflow.domain.model.user import User
from taskflow.domain.repository.user import UserRepository
from taskflow.domain.value import Email, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Enforces the same uniqueness rules as the database constraints.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email.root == email.root:
                return user
        return None

    async def find_by_google_id(self, google_id: str) -> Optional[User]:
        """Find a user by their Google account ID."""
        for user in self._users.values():
            if user.google_id == google_id:
                return user
        return None

    def _check_unique(self, user: User) -> None:
        for other in self._users.values():
            if other.id == user.id:
                continue
            if other.email.root == user.email.root:
                raise DuplicateKeyError("User", "email")
            if user.google_id and other.google_id == user.google_id:
                raise DuplicateKeyError("User", "google_id")

    async def create(self, user: User) -> User:
        """Insert a new user."""
        if user.id in self._users:
            raise DuplicateKeyError("User", "id")
        self._check_unique(user)
        self._users[user.id] = user
        return user

    async def update(self, user: User) -> User:
        """Replace an existing user."""
        if user.id not in self._users:
            raise NotFoundError("User", str(user.id))
        self._check_unique(user)
        self._users[user.id] = user
        return user
