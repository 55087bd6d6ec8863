"""Login use case (email and password)."""

import logfire
from pydantic import BaseModel

from taskflow.domain.error import (
    ExternalLoginRequiredError,
    InvalidCredentialsError,
    MissingFieldsError,
)
from taskflow.domain.service import JWTService, PasswordService, UserService
from taskflow.domain.value import Email

from .profile import AuthResponse, UserProfile


class LoginRequest(BaseModel):
    """Local login request."""

    email: str | None = None
    password: str | None = None


class LoginUseCase:
    """Use case for logging in with local credentials."""

    def __init__(
        self,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            password_service: Password hashing service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.password_service = password_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Unknown emails and wrong passwords fail with the same generic
        message. Accounts created through Google without a password get a
        distinct error pointing at Google login.

        Args:
            request: Login request

        Returns:
            Token and public profile

        Raises:
            MissingFieldsError: If email or password is absent
            ExternalLoginRequiredError: If the account has no password
            InvalidCredentialsError: If credentials do not match
        """
        raw_email = (request.email or "").strip()
        password = request.password or ""

        if not raw_email or not password:
            raise MissingFieldsError("Please provide email and password")

        try:
            email = Email(raw_email)
        except ValueError:
            raise InvalidCredentialsError()

        with logfire.span("login_user"):
            user = await self.user_service.get_user_by_email(email)
            if user is None:
                logfire.info("Login failed - unknown account")
                raise InvalidCredentialsError()

            if not user.has_password:
                logfire.info("Login failed - account has no password", user_id=str(user.id))
                raise ExternalLoginRequiredError()

            if not await self.password_service.verify(password, user.password_hash):
                logfire.info("Login failed - password mismatch", user_id=str(user.id))
                raise InvalidCredentialsError()

            token = self.jwt_service.create_token(str(user.id))
            logfire.info("User logged in", user_id=str(user.id))

            return AuthResponse(token=token, user=UserProfile.from_user(user))
