"""Authentication domain service."""

from taskflow.domain.error import ProviderNotConfiguredError
from taskflow.domain.value import AuthProvider, ProviderAssertion

from .base import Service


class OAuthClient:
    """Generic OAuth client interface for all providers."""

    @property
    def is_configured(self) -> bool:
        """Whether the client has the credentials it needs."""
        return True

    async def initiate_authorization(self, state: str) -> str:
        """Initiate OAuth authorization flow.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to
        """
        raise NotImplementedError

    async def complete_authorization(self, code: str, state: str) -> ProviderAssertion:
        """Complete OAuth authorization flow.

        Args:
            code: Authorization code from OAuth callback
            state: State parameter for verification

        Returns:
            Identity assertion from the provider
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for provider authentication operations.

    Holds the configured OAuth clients by provider. Providers without
    credentials are absent from the map.
    """

    def __init__(self, oauth_clients: dict[AuthProvider, OAuthClient]) -> None:
        """Initialize auth service.

        Args:
            oauth_clients: Map of provider to OAuth client implementation
        """
        self.oauth_clients = oauth_clients

    def _client(self, provider: AuthProvider) -> OAuthClient:
        client = self.oauth_clients.get(provider)
        if not client:
            raise ProviderNotConfiguredError(provider.value)
        return client

    async def initiate_login(self, provider: AuthProvider, state: str) -> str:
        """Initiate OAuth login flow for a provider.

        Args:
            provider: Authentication provider to use
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to

        Raises:
            ProviderNotConfiguredError: If provider is not configured
        """
        return await self._client(provider).initiate_authorization(state)

    async def complete_login(
        self, provider: AuthProvider, code: str, state: str
    ) -> ProviderAssertion:
        """Complete OAuth login flow for a provider.

        Args:
            provider: Authentication provider used
            code: Authorization code from OAuth callback
            state: State parameter for verification

        Returns:
            Identity assertion from the provider

        Raises:
            ProviderNotConfiguredError: If provider is not configured
        """
        return await self._client(provider).complete_authorization(code, state)
