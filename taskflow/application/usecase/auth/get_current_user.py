"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from taskflow.domain.error import NotFoundError
from taskflow.domain.service import UserService
from taskflow.domain.value import UserId

from .profile import UserProfile


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str  # Resolved from a verified bearer token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user: UserProfile


class GetCurrentUserUseCase:
    """Use case for getting the authenticated user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Load the profile for the token's user.

        A token can outlive its user; that case is reported as not found.

        Args:
            request: Request with user ID from the token

        Returns:
            Public profile

        Raises:
            NotFoundError: If the user no longer exists
        """
        try:
            user_id = UserId(UUID(request.user_id))
        except ValueError:
            raise NotFoundError("User", request.user_id)

        user = await self.user_service.get_by_id(user_id)
        return GetCurrentUserResponse(user=UserProfile.from_user(user))
