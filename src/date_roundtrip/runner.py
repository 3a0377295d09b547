"""
Sequential runner for the date round-trip reproduction
"""

import argparse
import asyncio
import logging
import sys
from datetime import datetime
from typing import List, Optional, Sequence

from date_roundtrip.config import settings
from date_roundtrip.database.connection import DatabaseConnection
from date_roundtrip.fixtures import TEST_DATES
from date_roundtrip.reporter import Reporter
from date_roundtrip.services.date_record_service import DateRecordService
from date_roundtrip.services.round_trip_service import (
    RoundTripResult,
    check_create_date,
    check_update_date,
)

logger = logging.getLogger(__name__)


async def main(
    service: DateRecordService,
    reporter: Reporter,
    dates: Sequence[datetime] = TEST_DATES
) -> List[RoundTripResult]:
    """Run the create and update round trips for each date in order"""
    reporter.title()

    results = []
    for date in dates:
        reporter.header(date)
        for check in (check_create_date, check_update_date):
            result = await check(service, date)
            reporter.result(result)
            results.append(result)
        reporter.separator()

    reporter.summary(results)
    logger.info(f"Completed {len(results)} round trips for {len(dates)} dates")
    return results


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Reproduce date round-trip discrepancies for ancient years"
    )
    parser.add_argument("--database-url", default=settings.DATABASE_URL,
                        help="Postgres connection string (default: $DATABASE_URL)")
    parser.add_argument("--table", default=settings.TABLE_NAME,
                        help="Table holding the id and date columns (default: %(default)s)")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL,
                        help="Logging level (default: %(default)s)")
    return parser.parse_args(argv)


def resolve_log_level(name: str) -> int:
    """Map a level name to its number, falling back to WARNING for unknown names"""
    level = logging.getLevelName(str(name).upper())
    if isinstance(level, int):
        return level
    logger.warning(f"Unknown log level {name!r}, using WARNING")
    return logging.WARNING


async def run(argv: Optional[Sequence[str]] = None, reporter: Optional[Reporter] = None) -> int:
    """
    Command line entry point

    Always returns 0: mismatches and errors are reported on the console only.
    """
    args = parse_args(argv)
    logging.getLogger().setLevel(resolve_log_level(args.log_level))

    # An empty URL is handed to asyncpg as-is
    if not args.database_url:
        logger.warning("DATABASE_URL not set - connection will use asyncpg defaults")

    connection = DatabaseConnection(
        args.database_url,
        connect_timeout=settings.CONNECT_TIMEOUT,
        command_timeout=settings.COMMAND_TIMEOUT
    )
    service = DateRecordService(connection, table_name=args.table)

    try:
        await main(service, reporter or Reporter())
    finally:
        await connection.disconnect()

    return 0


def cli():
    logging.basicConfig(level=logging.WARNING)
    sys.exit(asyncio.run(run()))
