"""Domain services."""

from .account_resolution_service import AccountResolutionService
from .auth_service import AuthService, OAuthClient
from .base import Service
from .jwt_service import JWTService
from .password_service import PasswordService
from .task_service import TaskService
from .user_service import UserService

__all__ = [
    "AccountResolutionService",
    "AuthService",
    "JWTService",
    "OAuthClient",
    "PasswordService",
    "Service",
    "TaskService",
    "UserService",
]
