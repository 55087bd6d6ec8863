"""Integration tests for UserRepository.

These tests verify the uniqueness guarantees that account resolution
relies on when two sign-ins race for the same identity.
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from taskflow.domain.error import DuplicateKeyError
from taskflow.domain.model import User
from taskflow.domain.repository import UserRepository
from taskflow.domain.value import AuthProvider, Email, UserId
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def make_user(email: str, google_id: str | None = None) -> User:
    now = datetime.now(timezone.utc)
    return User(
        id=UserId(uuid4()),
        name="Ada",
        email=Email(email),
        google_id=google_id,
        provider=AuthProvider.GOOGLE if google_id else AuthProvider.LOCAL,
        created_at=now,
        updated_at=now,
    )


def unique_email() -> str:
    return f"ada-{uuid4().hex[:12]}@example.com"


class TestUserRepositoryIntegration:
    """Integration tests for PostgresUserRepository."""

    @pytest.mark.asyncio
    async def test_find_by_email_extracts_root_value(self, integration_env):
        """Should query by the normalized string inside Email."""
        user_repo = await integration_env.get(UserRepository)
        email = unique_email()
        user = make_user(email)

        await user_repo.create(user)

        found = await user_repo.find_by_email(Email(email.upper()))
        assert found is not None
        assert found.id == user.id
        assert found.email.root == email

    @pytest.mark.asyncio
    async def test_duplicate_email_raises_and_session_survives(self, integration_env):
        """A colliding insert should roll back only its savepoint."""
        user_repo = await integration_env.get(UserRepository)
        email = unique_email()
        first = make_user(email)
        await user_repo.create(first)

        with pytest.raises(DuplicateKeyError) as exc_info:
            await user_repo.create(make_user(email))

        assert exc_info.value.field == "email"
        assert exc_info.value.resource == "User"

        found = await user_repo.find_by_email(Email(email))
        assert found is not None
        assert found.id == first.id

    @pytest.mark.asyncio
    async def test_duplicate_google_id_raises_and_session_survives(
        self, integration_env
    ):
        """Should map the google_id constraint to its own field."""
        user_repo = await integration_env.get(UserRepository)
        google_id = f"google-{uuid4().hex}"
        first = make_user(unique_email(), google_id=google_id)
        await user_repo.create(first)

        with pytest.raises(DuplicateKeyError) as exc_info:
            await user_repo.create(make_user(unique_email(), google_id=google_id))

        assert exc_info.value.field == "google_id"

        found = await user_repo.find_by_google_id(google_id)
        assert found is not None
        assert found.id == first.id

    @pytest.mark.asyncio
    async def test_update_onto_taken_google_id(self, integration_env):
        """Linking a google_id another user already holds should collide."""
        user_repo = await integration_env.get(UserRepository)
        google_id = f"google-{uuid4().hex}"
        await user_repo.create(make_user(unique_email(), google_id=google_id))
        local = make_user(unique_email())
        await user_repo.create(local)

        with pytest.raises(DuplicateKeyError) as exc_info:
            await user_repo.update(local.model_copy(update={"google_id": google_id}))

        assert exc_info.value.field == "google_id"

        reloaded = await user_repo.find_by_id(local.id)
        assert reloaded is not None
        assert reloaded.google_id is None
