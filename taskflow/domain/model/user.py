"""User aggregate root.

A user is the authenticated principal. It may hold local credentials
(a password hash), a linked Google identity, or both.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from taskflow.domain.model.common import DomainModel
from taskflow.domain.value import AuthProvider, Email, UserId


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(DomainModel):
    """User aggregate root.

    Email is unique across users. google_id is unique when present.
    A user without password_hash cannot complete a local login.
    """

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    email: Email
    password_hash: Optional[str] = None
    google_id: Optional[str] = None
    provider: AuthProvider = AuthProvider.LOCAL
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @property
    def has_password(self) -> bool:
        """Whether the account can log in with a password."""
        return bool(self.password_hash)
