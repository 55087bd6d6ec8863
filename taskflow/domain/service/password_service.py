"""Password hashing domain service."""

import logfire
from fastapi.concurrency import run_in_threadpool

from taskflow.util.password import hash_password, verify_password

from .base import Service


class PasswordService(Service):
    """Domain service for one-way password hashing and verification.

    Argon2 is CPU-bound, so both operations run in the worker thread pool
    and leave the event loop free for other requests.
    """

    async def hash(self, plain: str) -> str:
        """Hash a plain text password."""
        with logfire.span("password_service.hash"):
            return await run_in_threadpool(hash_password, plain)

    async def verify(self, plain: str, digest: str | None) -> bool:
        """Check a password against a stored digest.

        Returns False when the digest is missing.
        """
        with logfire.span("password_service.verify"):
            return await run_in_threadpool(verify_password, digest, plain)
