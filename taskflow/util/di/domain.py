"""Domain layer DI providers."""

from dishka import Scope, provide

from taskflow.config import AuthSettings
from taskflow.domain.repository import TaskRepository, UserRepository
from taskflow.domain.service import (
    AccountResolutionService,
    AuthService,
    JWTService,
    OAuthClient,
    PasswordService,
    TaskService,
    UserService,
)
from taskflow.domain.value import AuthProvider
from taskflow.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self, oauth_clients: dict[AuthProvider, OAuthClient]
    ) -> AuthService:
        """Provide provider authentication domain service.

        Args:
            oauth_clients: Dictionary mapping providers to their OAuth clients

        Returns:
            AuthService configured with the available OAuth clients
        """
        return AuthService(oauth_clients=oauth_clients)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_password_service(self) -> PasswordService:
        """Provide password hashing domain service."""
        return PasswordService()

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_account_resolution_service(
        self, user_service: UserService
    ) -> AccountResolutionService:
        """Provide account resolution domain service."""
        return AccountResolutionService(user_service=user_service)

    @provide
    def get_task_service(self, task_repository: TaskRepository) -> TaskService:
        """Provide task domain service."""
        return TaskService(task_repository=task_repository)
