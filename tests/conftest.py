"""Test configuration and fixtures."""

import logfire
import pytest

# Instrumentation in create_app() expects Logfire to be configured
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep developer environment variables out of Settings()."""
    for name in (
        "ENVIRONMENT",
        "DEBUG",
        "CLIENT_URL",
        "AUTH__JWT_SECRET",
        "AUTH__GOOGLE__CLIENT_ID",
        "AUTH__GOOGLE__CLIENT_SECRET",
        "AUTH__GOOGLE__CALLBACK_URL",
    ):
        monkeypatch.delenv(name, raising=False)
