"""Logfire setup and instrumentation.

Services and use cases log through logfire directly::

    import logfire

    with logfire.span("store_invite", room_id=room_id):
        logfire.info("Invite stored", medium=medium)

Invite tokens are only ever logged truncated, and private keys never.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from ident.config import ObservabilitySettings, Settings


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """Explicit setting first; otherwise send only when a token is configured."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is built.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send = should_send_to_logfire(observability)

    options: dict[str, Any] = dict(
        service_name="ident",
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    if observability.logfire_token:
        options["token"] = observability.logfire_token

    logfire.configure(**options)
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request.

    Headers are left out of the spans since they may carry credentials.
    """

    def request_attributes(request, attributes):
        extra = {"path": request.url.path} if hasattr(request, "url") else {}
        return {**attributes, **extra}

    logfire.instrument_fastapi(app, request_attributes_mapper=request_attributes)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every SQL statement run through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
