"""
Input validation for fixture dates
"""

from datetime import datetime

from pydantic import ValidationError

from date_roundtrip.models.date_record import DateInput
from date_roundtrip.utils.error_handling import InvalidDateError


def validate_date(value) -> datetime:
    """
    Validate that a value is a datetime

    Args:
        value: Candidate value of any type

    Returns:
        The same value, unchanged

    Raises:
        InvalidDateError: If the value is not a datetime instance
    """
    try:
        return DateInput(value=value).value
    except ValidationError as e:
        raise InvalidDateError(f"Invalid date {value!r}: {e.errors()[0]['msg']}") from e
