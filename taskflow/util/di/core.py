"""Configuration providers shared by every container."""

from dishka import Scope, provide

from taskflow.config import AuthSettings, GoogleOAuthSettings, Settings
from taskflow.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings read once per process from the environment and .env."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """JWT signing settings for the token service."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_google_settings(self, settings: Settings) -> GoogleOAuthSettings:
        """Google client credentials, with the callback URL already derived."""
        return settings.auth.google
