"""Unit tests for AccountResolutionService."""

import asyncio
from datetime import datetime, timezone
from uuid import uuid4

import pytest

from taskflow.domain.error import (
    AccountResolutionError,
    DuplicateKeyError,
    ProviderAssertionInvalidError,
)
from taskflow.domain.model import User
from taskflow.domain.service import AccountResolutionService, UserService
from taskflow.domain.value import AuthProvider, Email, ProviderAssertion, UserId
from taskflow.persistence.repository.inmemory import InMemoryUserRepository


def make_assertion(
    external_id: str | None = "google-sub-1",
    email: str | None = "ada@example.com",
    display_name: str | None = "Ada Lovelace",
) -> ProviderAssertion:
    return ProviderAssertion(
        provider=AuthProvider.GOOGLE,
        external_id=external_id,
        email=email,
        display_name=display_name,
        email_verified=True,
    )


def make_user(email: str = "ada@example.com", **kwargs) -> User:
    now = datetime.now(timezone.utc)
    return User(
        id=UserId(uuid4()),
        name=kwargs.pop("name", "Ada"),
        email=Email(email),
        created_at=now,
        updated_at=now,
        **kwargs,
    )


class YieldingUserRepository(InMemoryUserRepository):
    """Suspends on every lookup so concurrent resolutions interleave."""

    async def find_by_google_id(self, google_id):
        await asyncio.sleep(0)
        return await super().find_by_google_id(google_id)

    async def find_by_email(self, email):
        await asyncio.sleep(0)
        return await super().find_by_email(email)


class AlwaysCollidingUserRepository(InMemoryUserRepository):
    """Reports a uniqueness violation without ever storing the user."""

    async def create(self, user):
        raise DuplicateKeyError("User", "email")


class LinkRaceUserRepository(InMemoryUserRepository):
    """Lets another writer claim the Google ID just before the first link."""

    def __init__(self, racer: User) -> None:
        super().__init__()
        self.racer = racer

    async def update(self, user):
        if self.racer.id not in self._users:
            self._users[self.racer.id] = self.racer
        return await super().update(user)


class TestResolve:
    """Tests for AccountResolutionService.resolve()."""

    @pytest.mark.asyncio
    async def test_reuses_user_with_same_google_id(self):
        """Should return the user already linked to the external ID."""
        repo = InMemoryUserRepository()
        existing = make_user(google_id="google-sub-1", provider=AuthProvider.GOOGLE)
        await repo.create(existing)
        service = AccountResolutionService(UserService(repo))

        user = await service.resolve(make_assertion())

        assert user.id == existing.id

    @pytest.mark.asyncio
    async def test_links_local_account_with_same_email(self):
        """Should attach the Google ID and keep the password hash."""
        repo = InMemoryUserRepository()
        local = make_user(email="ada@example.com", password_hash="$argon2id$hash")
        await repo.create(local)
        service = AccountResolutionService(UserService(repo))

        user = await service.resolve(make_assertion(email="ADA@example.com "))

        assert user.id == local.id
        assert user.google_id == "google-sub-1"
        assert user.provider == AuthProvider.GOOGLE
        assert user.password_hash == "$argon2id$hash"

        stored = await repo.find_by_id(local.id)
        assert stored.google_id == "google-sub-1"

    @pytest.mark.asyncio
    async def test_linked_account_resolves_by_google_id_afterwards(self):
        """Should resolve a repeated assertion to the linked account."""
        repo = InMemoryUserRepository()
        local = make_user(password_hash="$argon2id$hash")
        await repo.create(local)
        service = AccountResolutionService(UserService(repo))

        first = await service.resolve(make_assertion())
        second = await service.resolve(make_assertion(email="changed@example.com"))

        assert first.id == local.id
        assert second.id == local.id

    @pytest.mark.asyncio
    async def test_creates_google_only_user(self):
        """Should create a user without a password when nothing matches."""
        repo = InMemoryUserRepository()
        service = AccountResolutionService(UserService(repo))

        user = await service.resolve(make_assertion())

        assert user.provider == AuthProvider.GOOGLE
        assert user.google_id == "google-sub-1"
        assert user.password_hash is None
        assert user.name == "Ada Lovelace"
        assert user.email.root == "ada@example.com"

    @pytest.mark.asyncio
    async def test_created_user_falls_back_to_email_name(self):
        """Should use the email local part when no display name is given."""
        service = AccountResolutionService(UserService(InMemoryUserRepository()))

        user = await service.resolve(make_assertion(display_name=None))

        assert user.name == "ada"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "external_id,email,missing",
        [
            (None, "ada@example.com", ["external_id"]),
            ("google-sub-1", None, ["email"]),
            ("  ", "", ["external_id", "email"]),
        ],
    )
    async def test_rejects_incomplete_assertion(self, external_id, email, missing):
        """Should fail when the external ID or email is missing."""
        repo = InMemoryUserRepository()
        service = AccountResolutionService(UserService(repo))

        with pytest.raises(ProviderAssertionInvalidError) as exc_info:
            await service.resolve(make_assertion(external_id=external_id, email=email))

        assert exc_info.value.missing == missing
        assert repo._users == {}

    @pytest.mark.asyncio
    async def test_concurrent_callbacks_create_one_user(self):
        """Should settle concurrent first logins on a single account."""
        repo = YieldingUserRepository()

        results = await asyncio.gather(
            *(
                AccountResolutionService(UserService(repo)).resolve(make_assertion())
                for _ in range(5)
            )
        )

        assert len(repo._users) == 1
        assert len({user.id for user in results}) == 1

    @pytest.mark.asyncio
    async def test_gives_up_after_repeated_collisions(self):
        """Should raise AccountResolutionError when creation never settles."""
        service = AccountResolutionService(
            UserService(AlwaysCollidingUserRepository())
        )

        with pytest.raises(AccountResolutionError):
            await service.resolve(make_assertion())

    @pytest.mark.asyncio
    async def test_link_collision_resolves_again(self):
        """Should restart when the Google ID is claimed while linking."""
        racer = make_user(
            email="ada@other.com",
            google_id="google-sub-1",
            provider=AuthProvider.GOOGLE,
        )
        repo = LinkRaceUserRepository(racer)
        local = make_user(email="ada@example.com", password_hash="$argon2id$hash")
        await repo.create(local)
        service = AccountResolutionService(UserService(repo))

        user = await service.resolve(make_assertion())

        assert user.id == racer.id
        stored_local = await repo.find_by_id(local.id)
        assert stored_local.google_id is None
        assert stored_local.password_hash == "$argon2id$hash"
