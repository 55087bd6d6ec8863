#!/usr/bin/env python3
"""Apply Alembic migrations for the Taskflow schema.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3f2c9b1d   # upgrade to a revision
"""

import sys

import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from taskflow.config import Settings
from taskflow.util.logging import setup_logging
from taskflow.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the database and report failures to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    target = argv[0] if argv else "head"
    database = make_url(settings.database_url)

    with logfire.span(
        "run_migrations", target=target, host=database.host, database=database.database
    ):
        try:
            # migrations/env.py reads DATABASE__URL itself
            command.upgrade(Config("alembic.ini"), target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy instead of starting on a stale schema
            raise

    logfire.info("Database migrations completed", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
