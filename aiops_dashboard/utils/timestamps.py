"""
Timestamp parsing helpers.

Review timestamps arrive as loosely formatted strings; anything that
cannot be read as a point in time becomes None.
"""

import logging
from datetime import date, datetime, time
from typing import Optional

import pandas as pd

logger = logging.getLogger(__name__)

END_OF_DAY = time(23, 59, 59, 999000)


def parse_timestamp(value) -> Optional[datetime]:
    """
    Parse a review timestamp string.

    Only values starting with a digit are considered, so pandas keywords
    such as "now" or "today" are rejected instead of resolving to the
    current time.

    Timezone-aware values are converted to UTC and made naive. Date
    filters then compare them against calendar-day bounds as UTC wall
    time, independent of the server's local timezone.

    Args:
        value: Raw ``created_ts`` value from the backend

    Returns:
        Naive datetime, or None if missing or unparsable
    """
    if not isinstance(value, str):
        return None

    value = value.strip()
    if not value[:1].isdigit():
        return None

    try:
        ts = pd.to_datetime(value, errors="coerce")
    except (TypeError, ValueError, OverflowError) as e:
        logger.debug(f"Unparsable timestamp {value!r}: {e}")
        return None

    if ts is None or pd.isna(ts):
        return None

    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC").tz_localize(None)

    return ts.to_pydatetime()


def start_of_day(day: date) -> datetime:
    """First instant of a calendar day."""
    return datetime.combine(day, time.min)


def end_of_day(day: date) -> datetime:
    """Last millisecond of a calendar day (23:59:59.999)."""
    return datetime.combine(day, END_OF_DAY)
