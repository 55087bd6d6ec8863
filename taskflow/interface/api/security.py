"""Bearer token authorization for protected routes."""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
import logfire

from taskflow.domain.service import JWTService
from taskflow.interface.error import UnauthorizedError
from taskflow.util.jwt import ExpiredTokenError, JWTError

bearer_scheme = HTTPBearer(auto_error=False)


async def _authenticate(
    request: Request, credentials: HTTPAuthorizationCredentials | None
) -> str:
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Not authorized, no token")

    # Request-scoped container opened by the dishka middleware
    jwt_service = await request.state.dishka_container.get(JWTService)
    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except ExpiredTokenError:
        raise UnauthorizedError("Token expired")
    except JWTError:
        raise UnauthorizedError("Invalid token")

    return payload.user_id


async def require_user_id(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    """Resolve the authenticated user ID from the Authorization header.

    The ID is also attached to ``request.state.user_id`` for downstream
    handlers.

    Raises:
        HTTPException: 401 if the header is absent, malformed, expired or
            fails signature verification
    """
    try:
        user_id = await _authenticate(request, credentials)
    except UnauthorizedError as e:
        logfire.info("Request rejected", path=request.url.path, reason=str(e))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )

    request.state.user_id = user_id
    return user_id
