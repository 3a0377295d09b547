"""
Date record Pydantic models
"""

from typing import Union
from datetime import date, datetime, time
from uuid import UUID
from pydantic import BaseModel, ConfigDict, field_validator

from date_roundtrip.utils.helpers import as_utc


class DateInput(BaseModel):
    """A value that must already be a datetime instance"""
    model_config = ConfigDict(strict=True, frozen=True)

    value: datetime


class DateRecord(BaseModel):
    """A row of the TestData table"""
    id: Union[int, UUID, str]
    date: datetime

    @field_validator("date", mode="before")
    @classmethod
    def normalize_to_utc(cls, value):
        # DATE columns come back as date, timestamp columns as naive datetime
        if isinstance(value, date) and not isinstance(value, datetime):
            value = datetime.combine(value, time())
        if isinstance(value, datetime):
            return as_utc(value)
        return value
