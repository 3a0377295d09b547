"""
Utility functions and helpers
"""

from datetime import datetime, timezone


def as_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime, treating naive values as UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_iso_string(value: datetime) -> str:
    """
    Format a datetime as YYYY-MM-DDTHH:MM:SS.mmmZ in UTC

    The year is always zero-padded to four digits, which strftime does
    not guarantee for years below 1000.
    """
    value = as_utc(value)
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f".{value.microsecond // 1000:03d}Z"
    )


def to_date_string(value: datetime) -> str:
    """Format the UTC calendar date portion as YYYY-MM-DD"""
    return to_iso_string(value).split("T")[0]


def utc_year(value: datetime) -> int:
    """Calendar year of a datetime in UTC"""
    return as_utc(value).year
