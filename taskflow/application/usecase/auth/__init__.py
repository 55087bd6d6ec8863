"""Authentication use cases."""

from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from .login import LoginRequest, LoginUseCase
from .oauth_login import OAuthLoginRequest, OAuthLoginUseCase
from .profile import AuthResponse, UserProfile
from .register import RegisterRequest, RegisterUseCase

__all__ = [
    "AuthResponse",
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginUseCase",
    "OAuthLoginRequest",
    "OAuthLoginUseCase",
    "RegisterRequest",
    "RegisterUseCase",
    "UserProfile",
]
