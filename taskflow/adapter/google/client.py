"""Google OAuth 2.0 client implementation.

Implements the authorization code flow for a confidential web client:
redirect to Google, exchange the returned code for an access token,
then read the OpenID Connect userinfo.
"""

from urllib.parse import urlencode

import httpx
import logfire

from taskflow.adapter.error import ProviderError
from taskflow.domain.service.auth_service import OAuthClient
from taskflow.domain.value import AuthProvider, ProviderAssertion


class GoogleOAuthError(ProviderError):
    """Google OAuth error."""

    pass


class GoogleOAuthClient(OAuthClient):
    """Base class for Google OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGoogleOAuthClient(GoogleOAuthClient):
    """Google OAuth 2.0 client requesting the openid, email and profile scopes."""

    authorize_url = "https://accounts.google.com/o/oauth2/v2/auth"
    token_url = "https://oauth2.googleapis.com/token"
    user_info_url = "https://openidconnect.googleapis.com/v1/userinfo"

    def __init__(
        self,
        client_id: str | None,
        client_secret: str | None,
        redirect_uri: str,
        timeout: float = 30.0,
    ) -> None:
        """Initialize Google OAuth client.

        Args:
            client_id: Google OAuth client ID
            client_secret: Google OAuth client secret
            redirect_uri: Callback URL registered with Google
            timeout: HTTP timeout in seconds
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self.client_id and self.client_secret and self.redirect_uri)

    async def initiate_authorization(self, state: str) -> str:
        """Build the Google consent URL.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to
        """
        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": "openid email profile",
            "state": state,
            "access_type": "online",
            "prompt": "select_account",
        }

        logfire.info(
            "Google OAuth authorization initiated", redirect_uri=self.redirect_uri
        )

        return f"{self.authorize_url}?{urlencode(params)}"

    async def complete_authorization(self, code: str, state: str) -> ProviderAssertion:
        """Complete Google OAuth authorization flow.

        Args:
            code: Authorization code from Google callback
            state: State parameter, already checked by the caller

        Returns:
            Identity assertion built from the userinfo response

        Raises:
            GoogleOAuthError: If token exchange or userinfo request fails
        """
        _ = state
        access_token = await self._exchange_code_for_token(code)
        user_info = await self._get_user_info(access_token)

        logfire.info("Google OAuth completed", sub=user_info.get("sub"))

        return ProviderAssertion(
            provider=AuthProvider.GOOGLE,
            external_id=user_info.get("sub"),
            email=user_info.get("email"),
            display_name=user_info.get("name"),
            email_verified=bool(user_info.get("email_verified", False)),
        )

    async def _exchange_code_for_token(self, code: str) -> str:
        """Exchange authorization code for access token.

        Raises:
            GoogleOAuthError: If token exchange fails
        """
        data = {
            "code": code,
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.token_url,
                    data=data,
                    headers={"Accept": "application/json"},
                )
        except httpx.HTTPError as e:
            logfire.error("Google token exchange HTTP error", error=str(e))
            raise GoogleOAuthError(f"HTTP error during token exchange: {e}")

        if response.status_code != 200:
            logfire.error(
                "Google token exchange failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise GoogleOAuthError(f"Token exchange failed: {response.status_code}")

        access_token = response.json().get("access_token")
        if not access_token:
            raise GoogleOAuthError("Token response did not include an access token")
        return access_token

    async def _get_user_info(self, access_token: str) -> dict:
        """Get OpenID Connect user information.

        Raises:
            GoogleOAuthError: If API request fails
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    self.user_info_url,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
        except httpx.HTTPError as e:
            logfire.error("Google userinfo HTTP error", error=str(e))
            raise GoogleOAuthError(f"HTTP error fetching user info: {e}")

        if response.status_code != 200:
            logfire.error(
                "Google userinfo request failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise GoogleOAuthError(f"User info request failed: {response.status_code}")

        return response.json()


class MockGoogleOAuthClient(GoogleOAuthClient):
    """Mock Google OAuth client for development and testing.

    Returns a fixed assertion without making network calls. The code
    "invalid" simulates a rejected exchange.
    """

    def __init__(self, assertion: ProviderAssertion | None = None):
        self.assertion = assertion or ProviderAssertion(
            provider=AuthProvider.GOOGLE,
            external_id="google-mock-123",
            email="mock.user@gmail.com",
            display_name="Mock Google User",
            email_verified=True,
        )

    async def initiate_authorization(self, state: str) -> str:
        return f"https://accounts.google.com/o/oauth2/v2/auth?mock=true&state={state}"

    async def complete_authorization(self, code: str, state: str) -> ProviderAssertion:
        _ = state
        if code == "invalid":
            raise GoogleOAuthError("Invalid authorization code")
        return self.assertion
