"""OAuth infrastructure provider."""

from dishka import Scope, provide
import logfire

from taskflow.adapter.google import GoogleOAuthClient
from taskflow.domain.service.auth_service import OAuthClient
from taskflow.domain.value import AuthProvider
from taskflow.util.di.base import ProviderBase


class OAuthAggregatorProvider(ProviderBase):
    """Provider that aggregates configured OAuth clients into a dictionary."""

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_oauth_clients(
        self,
        google_oauth_client: GoogleOAuthClient,
    ) -> dict[AuthProvider, OAuthClient]:
        """Provide dictionary of configured OAuth clients by provider.

        Args:
            google_oauth_client: Google OAuth client (specific type)

        Returns:
            Dictionary mapping AuthProvider to OAuthClient
        """
        clients: dict[AuthProvider, OAuthClient] = {}
        if google_oauth_client.is_configured:
            clients[AuthProvider.GOOGLE] = google_oauth_client
        else:
            logfire.warn("Google OAuth is not configured, Google login disabled")
        return clients
