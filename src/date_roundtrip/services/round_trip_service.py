"""
Create-path and update-path round trips for a single date
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from date_roundtrip.fixtures import PLACEHOLDER_DATE
from date_roundtrip.services.date_record_service import DateRecordService
from date_roundtrip.utils.helpers import utc_year
from date_roundtrip.utils.validation import validate_date

logger = logging.getLogger(__name__)


class Operation(str, Enum):
    CREATE = "CREATE"
    UPDATE = "UPDATE"


@dataclass
class RoundTripResult:
    """Outcome of writing a date and reading it back"""
    operation: Operation
    input_date: datetime
    original_year: int
    retrieved_date: Optional[datetime] = None
    retrieved_year: Optional[int] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def matched(self) -> bool:
        return self.succeeded and self.original_year == self.retrieved_year


def _failed(operation: Operation, input_date: datetime, error: Exception) -> RoundTripResult:
    logger.warning(f"{operation.value} round trip failed for {input_date!r}: {error}", exc_info=True)
    return RoundTripResult(
        operation=operation,
        input_date=input_date,
        original_year=utc_year(input_date) if isinstance(input_date, datetime) else 0,
        error=str(error)
    )


def _compared(operation: Operation, input_date: datetime, retrieved_date: datetime) -> RoundTripResult:
    return RoundTripResult(
        operation=operation,
        input_date=input_date,
        original_year=utc_year(input_date),
        retrieved_date=retrieved_date,
        retrieved_year=utc_year(retrieved_date)
    )


async def check_create_date(service: DateRecordService, input_date: datetime) -> RoundTripResult:
    """
    Insert a row holding the date, read it back, delete it and compare years

    Never raises: failures are returned as a result carrying the error text.
    """
    try:
        validated = validate_date(input_date)
        record = await service.create(validated)
        retrieved = await service.get_or_raise(record.id)
        await service.delete(record.id)
    except Exception as e:
        return _failed(Operation.CREATE, input_date, e)

    return _compared(Operation.CREATE, validated, retrieved.date)


async def check_update_date(service: DateRecordService, input_date: datetime) -> RoundTripResult:
    """
    Insert a placeholder row, update it to the date, read it back, delete it and compare years

    Never raises: failures are returned as a result carrying the error text.
    """
    try:
        validated = validate_date(input_date)
        record = await service.create(PLACEHOLDER_DATE)
        await service.update(record.id, validated)
        retrieved = await service.get_or_raise(record.id)
        await service.delete(record.id)
    except Exception as e:
        return _failed(Operation.UPDATE, input_date, e)

    return _compared(Operation.UPDATE, validated, retrieved.date)
