#!/usr/bin/env python3
"""Permanently remove content soft-deleted longer ago than the grace period.

Meant to run on a schedule (e.g. a daily cron job):

    python scripts/purge_deleted_content.py
    python scripts/purge_deleted_content.py --older-than 2026-01-01T00:00:00
"""

import argparse
import asyncio
import sys
from datetime import datetime

import logfire

from ask.application.usecase.content import (
    PurgeDeletedContentRequest,
    PurgeDeletedContentUseCase,
)
from ask.config import Settings
from ask.util.di.container import create_container
from ask.util.observability import configure_logfire


async def purge(older_than: datetime | None) -> int:
    container = create_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(PurgeDeletedContentUseCase)
            response = await use_case.execute(
                PurgeDeletedContentRequest(older_than=older_than)
            )
    finally:
        await container.close()
    return response.purged_count


def main() -> int:
    """Run the purge and log failures to Logfire."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--older-than",
        type=datetime.fromisoformat,
        default=None,
        help="ISO timestamp cutoff (default: now minus CONTENT__SOFT_DELETE_GRACE_DAYS)",
    )
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)

    try:
        purged = asyncio.run(purge(args.older_than))
        logfire.info("Purge finished", purged=purged)
        return 0
    except Exception as e:
        logfire.error(
            "Purge failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
