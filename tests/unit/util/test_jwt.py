"""Unit tests for JWT utilities."""

from datetime import datetime, timedelta, timezone

import jwt as pyjwt
import pytest

from taskflow.config import AuthSettings
from taskflow.util.jwt import (
    ExpiredTokenError,
    InvalidTokenError,
    create_token,
    verify_token,
)


@pytest.fixture
def settings() -> AuthSettings:
    return AuthSettings(jwt_secret="test-secret", jwt_ttl=timedelta(hours=1))


class TestCreateToken:
    """Tests for create_token()."""

    def test_token_round_trips_user_id(self, settings):
        """Should verify a freshly issued token to the same user ID."""
        token = create_token("user-123", settings)

        payload = verify_token(token, settings)

        assert payload.user_id == "user-123"
        assert payload.exp - payload.iat == timedelta(hours=1)

    def test_token_uses_configured_algorithm(self, settings):
        """Should sign with HS256 by default."""
        token = create_token("user-123", settings)

        header = pyjwt.get_unverified_header(token)

        assert header["alg"] == "HS256"


class TestVerifyToken:
    """Tests for verify_token()."""

    def test_expired_token(self, settings):
        """Should raise ExpiredTokenError once the TTL has elapsed."""
        issued_at = datetime.now(timezone.utc) - timedelta(hours=2)
        token = create_token("user-123", settings, issued_at=issued_at)

        with pytest.raises(ExpiredTokenError):
            verify_token(token, settings)

    def test_tampered_signature(self, settings):
        """Should raise InvalidTokenError when the signature is altered."""
        token = create_token("user-123", settings)
        header, payload, signature = token.split(".")
        flipped = "A" if signature[0] != "A" else "B"
        tampered = f"{header}.{payload}.{flipped}{signature[1:]}"

        with pytest.raises(InvalidTokenError):
            verify_token(tampered, settings)

    def test_token_signed_with_other_secret(self, settings):
        """Should reject tokens signed with a different key."""
        other = AuthSettings(jwt_secret="other-secret")
        token = create_token("user-123", other)

        with pytest.raises(InvalidTokenError):
            verify_token(token, settings)

    def test_missing_user_id_claim(self, settings):
        """Should reject a validly signed token without user_id."""
        now = datetime.now(timezone.utc)
        token = pyjwt.encode(
            {"iat": now, "exp": now + timedelta(hours=1)},
            settings.jwt_secret,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            verify_token(token, settings)

    def test_garbage_token(self, settings):
        """Should raise InvalidTokenError for malformed input."""
        with pytest.raises(InvalidTokenError):
            verify_token("not-a-jwt", settings)
