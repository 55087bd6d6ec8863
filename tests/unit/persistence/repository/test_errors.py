"""Unit tests for translate_errors()."""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from taskflow.domain.error import DuplicateKeyError, UpstreamUnavailableError
from taskflow.persistence.repository.errors import translate_errors


def unique_violation(constraint: str) -> IntegrityError:
    orig = Exception(
        f'duplicate key value violates unique constraint "{constraint}"'
    )
    return IntegrityError("INSERT INTO users ...", {}, orig)


class TestTranslateErrors:
    """Tests for translate_errors()."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "constraint,field",
        [("uq_users_email", "email"), ("uq_users_google_id", "google_id")],
    )
    async def test_unique_violation_names_field(self, constraint, field):
        """Should map each users constraint to the colliding field."""
        with pytest.raises(DuplicateKeyError) as exc_info:
            async with translate_errors("User"):
                raise unique_violation(constraint)

        assert exc_info.value.field == field
        assert exc_info.value.resource == "User"
        assert isinstance(exc_info.value.__cause__, IntegrityError)

    @pytest.mark.asyncio
    async def test_other_integrity_error_propagates(self):
        """Should leave violations of unknown constraints untouched."""
        with pytest.raises(IntegrityError):
            async with translate_errors("Task"):
                raise unique_violation("tasks_user_id_fkey")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            OperationalError("SELECT 1", {}, Exception("connection refused")),
            PoolTimeoutError("QueuePool limit reached"),
            ConnectionRefusedError(),
            TimeoutError(),
        ],
    )
    async def test_unreachable_database(self, error):
        """Should report connection failures as an unavailable upstream."""
        with pytest.raises(UpstreamUnavailableError):
            async with translate_errors("User"):
                raise error

    @pytest.mark.asyncio
    async def test_success_passes_through(self):
        """Should not interfere when the block succeeds."""
        async with translate_errors("User"):
            result = 1

        assert result == 1
