"""Production container and its FastAPI integration."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from ident.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container with every component's production implementation.

    Nothing is constructed until first requested: settings are read from the
    environment, and the signing key is derived, on first use.
    """
    providers = [get_provider(entry)() for entry in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the application, one request scope per HTTP request."""
    setup_dishka(container, app)
