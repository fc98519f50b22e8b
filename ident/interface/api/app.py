"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ident.interface.api.error_handlers import register_error_handlers
from ident.interface.api.routes import invites, pubkey, status
from ident.util.di.container import create_container, setup_di
from ident.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; start_app.py
    does it in production.

    Args:
        container: DI container to use, the production container by default
    """
    container = container or create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await container.close()

    app_instance = FastAPI(
        title="Ident",
        description="Matrix identity service for third-party invites",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    # Matrix clients call identity servers from the browser
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin", "X-Requested-With"],
    )

    setup_di(app_instance, container)
    register_error_handlers(app_instance)

    app_instance.include_router(status.router)
    app_instance.include_router(invites.router)
    app_instance.include_router(pubkey.router)

    return app_instance
