"""Authentication routes."""

import logging
import secrets
from urllib.parse import urlencode

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Depends, HTTPException, status
from fastapi.responses import RedirectResponse
import logfire

from taskflow.adapter.error import ProviderError
from taskflow.application.usecase.auth import (
    AuthResponse,
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    OAuthLoginRequest,
    OAuthLoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from taskflow.config import Settings
from taskflow.domain.error import (
    DuplicateAccountError,
    InvalidCredentialsError,
    MissingFieldsError,
    NotFoundError,
    ProviderAssertionInvalidError,
    ProviderNotConfiguredError,
)
from taskflow.domain.service import AuthService
from taskflow.domain.value import AuthProvider
from taskflow.interface.api.security import require_user_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["authentication"], route_class=DishkaRoute)

OAUTH_STATE_COOKIE = "oauth_state"
OAUTH_STATE_MAX_AGE = 10 * 60


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> AuthResponse:
    """Create a local account and return a token.

    Example:
        POST /api/auth/register
        {"name": "Ada", "email": "ada@example.com", "password": "secret"}

        Response (201):
        {"token": "eyJ...", "user": {"id": "...", "name": "Ada", ...}}
    """
    try:
        return await register_use_case.execute(request)
    except (MissingFieldsError, DuplicateAccountError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthResponse:
    """Log in with email and password.

    Unknown emails and wrong passwords share one message. Accounts that
    only have a Google identity are told to log in with Google.
    """
    try:
        return await login_use_case.execute(request)
    except MissingFieldsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_me(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    user_id: str = Depends(require_user_id),
) -> GetCurrentUserResponse:
    """Return the profile of the token's user.

    A token that outlives its user is rejected like any other bad token.
    """
    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(user_id=user_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User no longer exists",
            headers={"WWW-Authenticate": "Bearer"},
        )


@router.get("/google")
async def google_login(
    auth_service: FromDishka[AuthService],
) -> RedirectResponse:
    """Redirect the browser to Google's consent screen.

    A random state value is sent both to Google and to the browser as an
    HttpOnly cookie; the callback only accepts a matching pair.
    """
    state = secrets.token_urlsafe(32)

    try:
        auth_url = await auth_service.initiate_login(AuthProvider.GOOGLE, state)
    except ProviderNotConfiguredError:
        logger.error("Google login requested but Google OAuth is not configured")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Google OAuth is not configured. Please contact support.",
        )

    response = RedirectResponse(url=auth_url, status_code=status.HTTP_302_FOUND)
    response.set_cookie(
        key=OAUTH_STATE_COOKIE,
        value=state,
        max_age=OAUTH_STATE_MAX_AGE,
        httponly=True,
        samesite="lax",
        path="/api/auth",
    )
    return response


@router.get("/google/callback")
async def google_callback(
    oauth_login_use_case: FromDishka[OAuthLoginUseCase],
    settings: FromDishka[Settings],
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
    oauth_state: str | None = Cookie(default=None),
) -> RedirectResponse:
    """Handle Google's redirect and finish login in the browser.

    Never answers with JSON: success redirects to the client's callback
    page with the token, any failure to the login page with a short tag.

    Example:
        GET /api/auth/google/callback?code=abc&state=xyz

        Redirects to: {CLIENT_URL}/auth/callback?token=eyJ...
        On failure: {CLIENT_URL}/login?error=auth_failed&reason=invalid_state
    """
    if error:
        logger.info(f"Google OAuth denied by provider: {error}")
        return _failure_redirect(settings, "provider_denied")

    if not state or not oauth_state or not secrets.compare_digest(state, oauth_state):
        logger.warning("Google OAuth callback with missing or mismatched state")
        return _failure_redirect(settings, "invalid_state")

    if not code:
        return _failure_redirect(settings, "missing_code")

    try:
        result = await oauth_login_use_case.execute(
            OAuthLoginRequest(provider=AuthProvider.GOOGLE, code=code, state=state)
        )
    except ProviderAssertionInvalidError as e:
        logger.warning(f"Google OAuth assertion rejected: {e}")
        return _failure_redirect(settings, "invalid_assertion")
    except (ProviderError, ProviderNotConfiguredError) as e:
        logger.error(f"Google OAuth error during callback: {e}")
        return _failure_redirect(settings, "provider_error")
    except Exception as e:
        logger.exception(f"Unexpected error during Google OAuth callback: {e}")
        logfire.error("OAuth callback failed", error=str(e))
        return _failure_redirect(settings, "unexpected")

    logger.info(f"Google login successful for user: {result.user.id}")

    response = RedirectResponse(
        url=f"{settings.client_url}/auth/callback?{urlencode({'token': result.token})}",
        status_code=status.HTTP_302_FOUND,
    )
    response.delete_cookie(key=OAUTH_STATE_COOKIE, path="/api/auth")
    return response


def _failure_redirect(settings: Settings, reason: str) -> RedirectResponse:
    query = urlencode({"error": "auth_failed", "reason": reason})
    response = RedirectResponse(
        url=f"{settings.client_url}/login?{query}",
        status_code=status.HTTP_302_FOUND,
    )
    response.delete_cookie(key=OAUTH_STATE_COOKIE, path="/api/auth")
    return response
