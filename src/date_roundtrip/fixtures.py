"""
Fixed dates exercised by every round trip
"""

from datetime import datetime, timezone

TEST_DATES = (
    datetime(31, 1, 1, tzinfo=timezone.utc),
    datetime(32, 1, 1, tzinfo=timezone.utc),
    datetime(40, 1, 1, tzinfo=timezone.utc),
    datetime(50, 1, 1, tzinfo=timezone.utc),
    datetime(120, 1, 1, tzinfo=timezone.utc),
)

# Initial value of the update path, overwritten before comparison
PLACEHOLDER_DATE = datetime(2000, 1, 1, tzinfo=timezone.utc)
