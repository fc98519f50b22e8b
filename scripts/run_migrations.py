#!/usr/bin/env python3
"""Bring the database schema up to date.

Run from the repository root. The database URL is taken from the
application settings (DATABASE__URL).
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from ident.config import Settings
from ident.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main() -> int:
    """Upgrade to the latest revision, reporting failures to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("run_migrations", database=settings.database.url.split("://")[0]):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), "head")
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

    logfire.info("Database schema is at head")
    return 0


if __name__ == "__main__":
    sys.exit(main())
