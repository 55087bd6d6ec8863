"""Domain value objects for Taskflow.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from taskflow.domain.value.common import RootValueObject, ValueObject


class AuthProvider(str, Enum):
    """Origin of a user's credentials.

    Informational only: a linked account can hold both a password and a
    Google identifier.
    """

    LOCAL = "local"
    GOOGLE = "google"


class TaskStatus(str, Enum):
    """Progress state of a task."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class Email(RootValueObject[str]):
    """Email address, stored and compared in normalized form.

    Normalization strips surrounding whitespace and lower-cases the whole
    address, so "A@X.com " and "a@x.com" are the same account.
    """

    @field_validator("root")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Normalize and sanity-check the address."""
        v = v.strip().lower()
        if len(v) < 3 or len(v) > 255 or "@" not in v:
            raise ValueError("Email must be a valid address")
        return v


class ProviderAssertion(ValueObject):
    """Identity assertion returned by an external provider.

    Fields are optional here: the provider may omit them, and the account
    resolution policy rejects assertions without an id or email.
    """

    provider: AuthProvider
    external_id: str | None = None  # Stable provider subject (Google "sub")
    email: str | None = None
    display_name: str | None = None
    email_verified: bool = False
