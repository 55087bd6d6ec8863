"""Logfire setup and instrumentation for the API process.

Application code logs through logfire directly:

    logfire.info("Task created", task_id=str(task.id), user_id=str(user_id))

    with logfire.span("account_resolution_service.resolve", provider="google"):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from taskflow.config import Settings

# Request bodies on these routes carry passwords and OAuth codes
_CREDENTIAL_PATH_PREFIX = "/api/auth"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the running environment.

    Telemetry leaves the process only when OBSERVABILITY__SEND_TO_LOGFIRE is
    true, or when it is unset and OBSERVABILITY__LOGFIRE_TOKEN is present.
    Otherwise spans go to the console only.
    """
    observability = settings.observability
    send_to_logfire = observability.send_to_logfire
    if send_to_logfire is None:
        send_to_logfire = bool(observability.logfire_token)

    logfire.configure(
        service_name="taskflow-api",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes):
    """Attach the caller to each request span and keep credentials out of it."""
    result = {**attributes}

    if request.url.path.startswith(_CREDENTIAL_PATH_PREFIX):
        result.pop("values", None)

    user_id = getattr(request.state, "user_id", None)
    if user_id:
        result["user_id"] = user_id

    if request.client:
        result["client_host"] = request.client.host

    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request. Authorization headers are never captured."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace outbound calls to the Google token and userinfo endpoints."""
    logfire.instrument_httpx()
