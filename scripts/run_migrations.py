#!/usr/bin/env python3
"""Create or upgrade the kv_entries table with Logfire error tracking."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from topten.config import Settings
from topten.util.observability import configure_logfire


def main() -> int:
    """Run migrations and log any errors to Logfire."""
    settings = Settings()

    configure_logfire(settings)

    if settings.storage.backend != "sql":
        logfire.info(
            "Storage backend has no schema, skipping migrations",
            backend=settings.storage.backend,
        )
        return 0

    try:
        logfire.info("Starting database migrations")

        alembic_cfg = Config("alembic.ini")
        command.upgrade(alembic_cfg, "head")

        logfire.info("Database migrations completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main())
