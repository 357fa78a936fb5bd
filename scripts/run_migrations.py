#!/usr/bin/env python3
"""Apply Alembic migrations before the API starts.

    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3f1c9a2d7b04
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from ask.config import Settings
from ask.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the schema to the requested revision, logging failures."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[0] if argv else "head"

    try:
        with logfire.span("migrations.upgrade", target=target):
            command.upgrade(Config("alembic.ini"), target)
        logfire.info("Database schema upgraded", target=target)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            target=target,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
