"""
Database connection management
"""

import asyncio
import logging
from typing import Optional

import asyncpg

logger = logging.getLogger(__name__)


class DatabaseConnection:
    """Single asyncpg connection opened on first use and held for the process lifetime"""

    def __init__(self, database_url: str, connect_timeout: float = 10.0, command_timeout: float = 30.0):
        self.database_url = database_url
        self.connect_timeout = connect_timeout
        self.command_timeout = command_timeout
        self.conn: Optional[asyncpg.Connection] = None

    @property
    def is_connected(self) -> bool:
        return self.conn is not None and not self.conn.is_closed()

    async def connect(self):
        """Open the database connection if it is not already open"""
        if self.is_connected:
            return

        self.conn = await asyncpg.connect(
            self.database_url,
            timeout=self.connect_timeout,
            command_timeout=self.command_timeout,
            statement_cache_size=0,  # pgbouncer compatibility
            # timestamptz parameters assigned to timestamp columns convert in the session zone
            server_settings={"timezone": "UTC"}
        )
        logger.info("Database connection opened")

    async def disconnect(self):
        """Close the database connection"""
        if self.conn is None:
            return
        try:
            await asyncio.wait_for(self.conn.close(), timeout=self.command_timeout)
        except asyncio.TimeoutError:
            logger.warning("Database connection close timed out, terminating")
            self.conn.terminate()
        finally:
            self.conn = None
        logger.info("Database connection closed")

    async def acquire(self) -> asyncpg.Connection:
        """Get the live connection, connecting first if needed"""
        await self.connect()
        return self.conn
