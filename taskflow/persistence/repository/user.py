"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskflow.domain.error import NotFoundError
from taskflow.domain.model import User
from taskflow.domain.repository import UserRepository
from taskflow.domain.value import Email, UserId
from taskflow.persistence.mappers import row_to_user, user_to_dict
from taskflow.persistence.repository.errors import translate_errors
from taskflow.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, stmt) -> Optional[User]:
        async with translate_errors("User"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return await self._find_one(
            select(users_table).where(users_table.c.id == user_id)
        )

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their normalized email."""
        return await self._find_one(
            select(users_table).where(users_table.c.email == email.root)
        )

    async def find_by_google_id(self, google_id: str) -> Optional[User]:
        """Find a user by their Google account ID."""
        return await self._find_one(
            select(users_table).where(users_table.c.google_id == google_id)
        )

    async def create(self, user: User) -> User:
        """Insert a user inside a savepoint.

        A unique violation rolls back only the savepoint, so the request
        transaction stays usable for a follow-up lookup.

        Args:
            user: User to insert

        Returns:
            Created user

        Raises:
            DuplicateKeyError: If email or google_id is already taken
        """
        async with translate_errors("User"):
            async with self.session.begin_nested():
                await self.session.execute(
                    users_table.insert().values(**user_to_dict(user))
                )
        return user

    async def update(self, user: User) -> User:
        """Replace an existing user by ID.

        Args:
            user: User with updated fields

        Returns:
            Updated user
        """
        values = user_to_dict(user)
        values.pop("id")
        values.pop("created_at")

        async with translate_errors("User"):
            async with self.session.begin_nested():
                result = await self.session.execute(
                    users_table.update()
                    .where(users_table.c.id == user.id)
                    .values(**values)
                )

        if result.rowcount == 0:
            raise NotFoundError("User", str(user.id))
        return user
