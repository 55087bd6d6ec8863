"""Google infrastructure providers."""

from dishka import Scope, provide

from taskflow.adapter.google import GoogleOAuthClient, RealGoogleOAuthClient
from taskflow.config import GoogleOAuthSettings
from taskflow.util.di.base import ProviderBase


class GoogleProvider(ProviderBase):
    """Google component base."""

    __mock_component__ = "google"


class ProdGoogleProvider(GoogleProvider):
    """Production Google provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_google_oauth_client(
        self, google: GoogleOAuthSettings
    ) -> GoogleOAuthClient:
        """Provide Google OAuth client.

        The client is built even without credentials; it then reports
        itself as not configured and the OAuth aggregator leaves it out.

        Returns:
            Google OAuth 2.0 client
        """
        return RealGoogleOAuthClient(
            client_id=google.client_id,
            client_secret=google.client_secret,
            redirect_uri=google.callback_url or "",
        )
