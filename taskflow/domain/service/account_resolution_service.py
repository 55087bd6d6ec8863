"""Account resolution for external provider logins."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from taskflow.domain.error import (
    AccountResolutionError,
    DuplicateKeyError,
    ProviderAssertionInvalidError,
)
from taskflow.domain.model import User
from taskflow.domain.value import AuthProvider, Email, ProviderAssertion, UserId

from .base import Service
from .user_service import UserService

# Each retry follows a uniqueness collision with a concurrent writer
MAX_RESOLUTION_ATTEMPTS = 3


class AccountResolutionService(Service):
    """Decides whether a provider assertion reuses, links or creates an account.

    Resolution order:
    1. A user already carrying this Google ID is reused.
    2. A user with the same email is linked: the Google ID is attached and any
       existing password is kept, so both login methods work afterwards.
    3. Otherwise a new Google-only user is created.

    Email is trusted as the anchor for merging accounts. Concurrent callbacks
    for the same new account are settled by the store's unique constraints:
    a collision on create or link restarts resolution, which then finds the
    record the other writer stored.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize account resolution service.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def resolve(self, assertion: ProviderAssertion) -> User:
        """Resolve a provider assertion to a local user.

        Args:
            assertion: Identity assertion verified by the provider exchange

        Returns:
            Existing, linked or newly created user

        Raises:
            ProviderAssertionInvalidError: If external ID or email is missing
            AccountResolutionError: If creation keeps colliding
        """
        external_id, email = self._validate(assertion)

        with logfire.span(
            "account_resolution_service.resolve", provider=assertion.provider.value
        ):
            for attempt in range(1, MAX_RESOLUTION_ATTEMPTS + 1):
                existing = await self.user_service.get_user_by_google_id(external_id)
                if existing:
                    logfire.info(
                        "Resolved by provider identity", user_id=str(existing.id)
                    )
                    return existing

                by_email = await self.user_service.get_user_by_email(email)
                try:
                    if by_email:
                        return await self._link(by_email, assertion, external_id)
                    return await self._create(assertion, external_id, email)
                except DuplicateKeyError as e:
                    logfire.warn(
                        "Concurrent account write detected, resolving again",
                        attempt=attempt,
                        field=e.field,
                    )

            raise AccountResolutionError(
                f"Account resolution did not settle after {MAX_RESOLUTION_ATTEMPTS} attempts"
            )

    def _validate(self, assertion: ProviderAssertion) -> tuple[str, Email]:
        external_id = (assertion.external_id or "").strip()
        raw_email = (assertion.email or "").strip()

        missing = []
        if not external_id:
            missing.append("external_id")
        if not raw_email:
            missing.append("email")
        if missing:
            logfire.warn("Provider assertion rejected", missing=missing)
            raise ProviderAssertionInvalidError(missing)

        try:
            email = Email(raw_email)
        except ValueError:
            raise ProviderAssertionInvalidError(["email"])

        return external_id, email

    async def _link(
        self, user: User, assertion: ProviderAssertion, external_id: str
    ) -> User:
        """Attach the provider identity to an account found by email."""
        if user.google_id and user.google_id != external_id:
            logfire.warn(
                "Replacing Google ID on account matched by email",
                user_id=str(user.id),
            )

        linked = user.model_copy(
            update={
                "google_id": external_id,
                "provider": AuthProvider.GOOGLE,
                "updated_at": datetime.now(timezone.utc),
            }
        )
        saved = await self.user_service.update(linked)
        logfire.info(
            "Linked provider identity to existing account",
            user_id=str(saved.id),
            has_password=saved.has_password,
            email_verified=assertion.email_verified,
        )
        return saved

    async def _create(
        self, assertion: ProviderAssertion, external_id: str, email: Email
    ) -> User:
        name = (assertion.display_name or "").strip() or email.root.split("@")[0]
        now = datetime.now(timezone.utc)
        user = User(
            id=UserId(uuid4()),
            name=name[:255],
            email=email,
            password_hash=None,
            google_id=external_id,
            provider=AuthProvider.GOOGLE,
            created_at=now,
            updated_at=now,
        )
        return await self.user_service.create(user)
