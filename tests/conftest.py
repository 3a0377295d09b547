"""
pytest configuration and fixtures for the date round-trip suite
In-memory stand-in for the TestData table plus console capture
"""

import io
import itertools
from datetime import datetime
from typing import Dict, Optional

import pytest
from rich.console import Console

from date_roundtrip.models.date_record import DateRecord
from date_roundtrip.reporter import Reporter
from date_roundtrip.utils.error_handling import RecordNotFoundError


class InMemoryDateRecordService:
    """Same interface as DateRecordService, backed by a dict"""

    def __init__(self, year_shift: int = 0, fail_on: Optional[str] = None):
        self.rows: Dict[int, datetime] = {}
        self.calls = []
        self.year_shift = year_shift
        self.fail_on = fail_on
        self._ids = itertools.count(1)

    def _record(self, operation: str, *args):
        self.calls.append((operation,) + args)
        if operation == self.fail_on:
            raise ConnectionError(f"{operation} failed: connection refused")

    def _store(self, date: datetime) -> datetime:
        # Reproduces a driver that shifts ancient years on write
        if self.year_shift and date.year < 1900:
            return date.replace(year=date.year + self.year_shift)
        return date

    async def create(self, date: datetime) -> DateRecord:
        self._record("create", date)
        record_id = next(self._ids)
        self.rows[record_id] = self._store(date)
        return DateRecord(id=record_id, date=self.rows[record_id])

    async def get(self, record_id) -> Optional[DateRecord]:
        self._record("get", record_id)
        if record_id not in self.rows:
            return None
        return DateRecord(id=record_id, date=self.rows[record_id])

    async def get_or_raise(self, record_id) -> DateRecord:
        record = await self.get(record_id)
        if record is None:
            raise RecordNotFoundError("TestData", record_id)
        return record

    async def update(self, record_id, date: datetime) -> DateRecord:
        self._record("update", record_id, date)
        if record_id not in self.rows:
            raise RecordNotFoundError("TestData", record_id)
        self.rows[record_id] = self._store(date)
        return DateRecord(id=record_id, date=self.rows[record_id])

    async def delete(self, record_id):
        self._record("delete", record_id)
        self.rows.pop(record_id, None)

    async def count(self) -> int:
        return len(self.rows)


@pytest.fixture
def fake_service():
    """Faithful in-memory store"""
    return InMemoryDateRecordService()


@pytest.fixture
def shifting_service():
    """In-memory store that adds 1900 years to pre-1900 dates"""
    return InMemoryDateRecordService(year_shift=1900)


@pytest.fixture
def console_output():
    """Plain-text console buffer without color codes"""
    return io.StringIO()


@pytest.fixture
def reporter(console_output):
    console = Console(file=console_output, width=200, force_terminal=False, color_system=None)
    return Reporter(console)
