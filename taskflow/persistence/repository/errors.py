"""Translation of SQLAlchemy errors into domain errors."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from taskflow.domain.error import DuplicateKeyError, UpstreamUnavailableError

# Constraint name -> domain field, see persistence.tables
UNIQUE_CONSTRAINTS = {
    "uq_users_email": "email",
    "uq_users_google_id": "google_id",
}


@asynccontextmanager
async def translate_errors(resource: str) -> AsyncIterator[None]:
    """Map driver failures raised inside the block to domain errors.

    Raises:
        DuplicateKeyError: On a unique constraint violation
        UpstreamUnavailableError: When the database cannot be reached
    """
    try:
        yield
    except IntegrityError as e:
        message = str(e.orig)
        for constraint, field in UNIQUE_CONSTRAINTS.items():
            if constraint in message:
                raise DuplicateKeyError(resource, field) from e
        raise
    except (
        OperationalError,
        InterfaceError,
        PoolTimeoutError,
        OSError,
        TimeoutError,
    ) as e:
        logfire.error("Database unavailable", resource=resource, error=str(e))
        raise UpstreamUnavailableError("Database unavailable") from e
