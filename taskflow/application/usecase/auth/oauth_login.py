"""OAuth login use case (external provider callback)."""

import logfire
from pydantic import BaseModel

from taskflow.domain.service import AccountResolutionService, AuthService, JWTService
from taskflow.domain.value import AuthProvider

from .profile import AuthResponse, UserProfile


class OAuthLoginRequest(BaseModel):
    """Login request from an OAuth callback.

    These parameters come from the provider in the callback URL.
    """

    provider: AuthProvider
    code: str  # OAuth authorization code
    state: str  # State parameter, already matched against the browser cookie


class OAuthLoginUseCase:
    """Use case for logging in through an external provider."""

    def __init__(
        self,
        auth_service: AuthService,
        account_resolution_service: AccountResolutionService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize OAuth login use case.

        Args:
            auth_service: Authentication domain service (provider clients)
            account_resolution_service: Reuse/link/create policy
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.account_resolution_service = account_resolution_service
        self.jwt_service = jwt_service

    async def execute(self, request: OAuthLoginRequest) -> AuthResponse:
        """Execute provider login flow.

        Steps:
        1. Complete the code exchange with the provider
        2. Resolve the assertion to a local account (reuse, link or create)
        3. Issue a JWT token

        Args:
            request: OAuth callback parameters

        Returns:
            Token and public profile

        Raises:
            ProviderError: If the provider exchange fails
            ProviderNotConfiguredError: If the provider has no client
            ProviderAssertionInvalidError: If the assertion lacks id or email
        """
        assertion = await self.auth_service.complete_login(
            request.provider, request.code, request.state
        )

        logfire.info("OAuth completed", provider=assertion.provider.value)

        with logfire.span("oauth_login_user", provider=request.provider.value):
            user = await self.account_resolution_service.resolve(assertion)
            token = self.jwt_service.create_token(str(user.id))

            return AuthResponse(token=token, user=UserProfile.from_user(user))
