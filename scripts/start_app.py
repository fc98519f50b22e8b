#!/usr/bin/env python3
"""Start the identity service with Logfire error tracking for startup errors."""

import sys

import logfire
import uvicorn

from ident.config import Settings
from ident.domain.service import KeyService
from ident.util.logging import setup_logging
from ident.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        # An unusable signing key must stop the service before it listens
        KeyService.from_settings(settings)

        logfire.info("Starting identity service", host=settings.host, port=settings.port)

        uvicorn.run(
            "ident.interface.api.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
