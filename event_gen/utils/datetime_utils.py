"""Utility functions for working with dates and times."""

from __future__ import annotations

import re
import time
from datetime import date, datetime

__all__ = [
    "current_millis",
    "parse_local_datetime",
    "age_on",
]

# YYYY-MM-DDTHH:mm with optional :ss and fractional seconds, no offset
_LOCAL_DATETIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d{1,6})?)?$")


def current_millis() -> int:
    """Return the current epoch time in milliseconds."""
    return time.time_ns() // 1_000_000


def parse_local_datetime(value: str) -> datetime:
    """Parse an ISO-8601 local date-time such as ``2025-03-21T20:00``.

    Raises
    ------
    ValueError
        If *value* is not in ``YYYY-MM-DDTHH:mm[:ss[.ffffff]]`` form or names
        an impossible date.
    """
    if not isinstance(value, str) or not _LOCAL_DATETIME_RE.match(value):
        raise ValueError(f"Invalid date format: {value}")

    if len(value) == 16:
        fmt = "%Y-%m-%dT%H:%M"
    elif "." in value:
        fmt = "%Y-%m-%dT%H:%M:%S.%f"
    else:
        fmt = "%Y-%m-%dT%H:%M:%S"
    try:
        return datetime.strptime(value, fmt)
    except ValueError as exc:
        raise ValueError(f"Invalid date format: {value}") from exc


def age_on(date_of_birth: date, today: date) -> int:
    """Whole years elapsed between *date_of_birth* and *today*."""
    years = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        years -= 1
    return years
