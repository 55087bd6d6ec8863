"""Public user profile shared by the auth use cases."""

from pydantic import BaseModel

from taskflow.domain.model import User
from taskflow.domain.value import AuthProvider


class UserProfile(BaseModel):
    """User fields safe to return to clients. Never carries the password hash."""

    id: str
    name: str
    email: str
    provider: AuthProvider

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email.root,
            provider=user.provider,
        )


class AuthResponse(BaseModel):
    """Issued token with the profile it belongs to."""

    token: str
    user: UserProfile
