"""Register use case."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire
from pydantic import BaseModel

from taskflow.domain.error import (
    DuplicateAccountError,
    DuplicateKeyError,
    MissingFieldsError,
)
from taskflow.domain.model import User
from taskflow.domain.service import JWTService, PasswordService, UserService
from taskflow.domain.value import AuthProvider, Email, UserId

from .profile import AuthResponse, UserProfile


class RegisterRequest(BaseModel):
    """Registration request with local credentials."""

    name: str | None = None
    email: str | None = None
    password: str | None = None


class RegisterUseCase:
    """Use case for creating a local (email/password) account."""

    def __init__(
        self,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            password_service: Password hashing service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.password_service = password_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute registration flow.

        Steps:
        1. Require name, email and password
        2. Reject an email that already has an account
        3. Hash the password and create the user
        4. Issue a JWT token

        Args:
            request: Registration request

        Returns:
            Token and public profile of the new user

        Raises:
            MissingFieldsError: If any field is absent or blank
            DuplicateAccountError: If the email is already registered
        """
        name = (request.name or "").strip()
        raw_email = (request.email or "").strip()
        password = request.password or ""

        if not name or not raw_email or not password:
            raise MissingFieldsError(
                "Please provide name, email, and password",
                fields=[
                    field
                    for field, value in (
                        ("name", name),
                        ("email", raw_email),
                        ("password", password),
                    )
                    if not value
                ],
            )

        try:
            email = Email(raw_email)
        except ValueError:
            raise MissingFieldsError("Please provide a valid email", fields=["email"])

        with logfire.span("register_user"):
            if await self.user_service.get_user_by_email(email):
                logfire.warn("Registration rejected - email already registered")
                raise DuplicateAccountError()

            now = datetime.now(timezone.utc)
            user = User(
                id=UserId(uuid4()),
                name=name[:255],
                email=email,
                password_hash=await self.password_service.hash(password),
                provider=AuthProvider.LOCAL,
                created_at=now,
                updated_at=now,
            )

            try:
                saved = await self.user_service.create(user)
            except DuplicateKeyError:
                # Registered concurrently between the lookup and the insert
                raise DuplicateAccountError()

            token = self.jwt_service.create_token(str(saved.id))

            return AuthResponse(token=token, user=UserProfile.from_user(saved))
