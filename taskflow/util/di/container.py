"""Production DI container and its FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI
import logfire

from taskflow.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container with the real implementation of every component.

    Mocked variants of "google" and "persistence" are only selected by the
    test container builder.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    logfire.info(
        "DI container built",
        providers=[type(provider).__name__ for provider in providers],
    )
    # FastapiProvider exposes the current Request to REQUEST-scoped factories
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app for DishkaRoute and request.state lookups."""
    setup_dishka(container, app)
