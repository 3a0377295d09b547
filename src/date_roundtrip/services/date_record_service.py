"""
Data access for the TestData table
"""

import logging
from datetime import datetime
from typing import Optional

from date_roundtrip.database.connection import DatabaseConnection
from date_roundtrip.models.date_record import DateRecord
from date_roundtrip.utils.error_handling import RecordNotFoundError

logger = logging.getLogger(__name__)


def quote_identifier(name: str) -> str:
    """Quote a table or column name for Postgres"""
    return '"' + name.replace('"', '""') + '"'


class DateRecordService:
    """Create, read, update and delete rows holding a single date column"""

    def __init__(self, connection: DatabaseConnection, table_name: str = "TestData"):
        self.connection = connection
        self.table_name = table_name
        self.table = quote_identifier(table_name)

    async def create(self, date: datetime) -> DateRecord:
        """Insert a row with the given date and return it"""
        conn = await self.connection.acquire()
        # Bound as timestamptz so both timestamp column flavours accept it
        row = await conn.fetchrow(
            f'INSERT INTO {self.table} ("date") VALUES ($1::timestamptz) RETURNING "id", "date"',
            date
        )
        record = DateRecord(**dict(row))
        logger.debug(f"Created {self.table_name} record {record.id}")
        return record

    async def get(self, record_id) -> Optional[DateRecord]:
        """Fetch a row by id"""
        conn = await self.connection.acquire()
        row = await conn.fetchrow(
            f'SELECT "id", "date" FROM {self.table} WHERE "id" = $1',
            record_id
        )
        if row is None:
            return None
        return DateRecord(**dict(row))

    async def get_or_raise(self, record_id) -> DateRecord:
        """Fetch a row by id, raising RecordNotFoundError when missing"""
        record = await self.get(record_id)
        if record is None:
            raise RecordNotFoundError(self.table_name, record_id)
        return record

    async def update(self, record_id, date: datetime) -> DateRecord:
        """Set the date of an existing row"""
        conn = await self.connection.acquire()
        row = await conn.fetchrow(
            f'UPDATE {self.table} SET "date" = $2::timestamptz WHERE "id" = $1 RETURNING "id", "date"',
            record_id,
            date
        )
        if row is None:
            raise RecordNotFoundError(self.table_name, record_id)
        logger.debug(f"Updated {self.table_name} record {record_id}")
        return DateRecord(**dict(row))

    async def delete(self, record_id):
        """Delete a row by id"""
        conn = await self.connection.acquire()
        await conn.execute(f'DELETE FROM {self.table} WHERE "id" = $1', record_id)
        logger.debug(f"Deleted {self.table_name} record {record_id}")

    async def count(self) -> int:
        """Number of rows currently in the table"""
        conn = await self.connection.acquire()
        return await conn.fetchval(f"SELECT COUNT(*) FROM {self.table}")
