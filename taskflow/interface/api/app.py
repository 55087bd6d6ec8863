"""FastAPI application."""

import logging

from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from taskflow.config import Settings
from taskflow.domain.error import UpstreamUnavailableError
from taskflow.interface.api.routes import auth, health, tasks
from taskflow.util.di.container import create_container, setup_di
from taskflow.util.error import ConfigurationError
from taskflow.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)

logger = logging.getLogger(__name__)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it and passes a test container.

    Args:
        container: DI container to use instead of the production one

    Raises:
        ConfigurationError: If production settings are incomplete
    """
    settings = Settings()

    missing = settings.missing_required()
    if missing:
        raise ConfigurationError(missing)

    # Instrument httpx for outbound HTTP requests
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    app_instance = FastAPI(
        title="Taskflow API",
        description="Backend API for Taskflow - personal task lists with email and Google sign-in",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(tasks.router)

    _register_error_handlers(app_instance, settings)

    return app_instance


def _register_error_handlers(app_instance: FastAPI, settings: Settings) -> None:
    @app_instance.exception_handler(UpstreamUnavailableError)
    async def upstream_unavailable(
        request: Request, exc: UpstreamUnavailableError
    ) -> JSONResponse:
        logger.error(f"Upstream unavailable on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Service temporarily unavailable"},
        )

    @app_instance.exception_handler(Exception)
    async def unhandled(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.url.path}: {exc}")
        content = {"detail": "Server Error"}
        if settings.debug:
            content["error"] = str(exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content
        )


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
