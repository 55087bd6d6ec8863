"""Password hashing utilities (Argon2)."""

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

_PH = PasswordHasher()


def hash_password(plain: str) -> str:
    """Hash a plain text password.

    The returned digest embeds a random salt and the Argon2 parameters.

    Raises:
        ValueError: If password is empty
    """
    if not plain:
        raise ValueError("Password must not be empty")
    return _PH.hash(plain)


def verify_password(hash_value: str | None, plain: str) -> bool:
    """Check a plain text password against a stored digest."""
    if not hash_value or not plain:
        return False
    try:
        return _PH.verify(hash_value, plain)
    except (VerificationError, InvalidHashError):
        return False
