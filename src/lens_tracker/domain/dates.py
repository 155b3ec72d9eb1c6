"""Calendar-date helpers.

All values are plain :class:`datetime.date` objects, so arithmetic happens on
the local calendar and never shifts across a UTC boundary.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import InvalidDateFormatError

logger = logging.getLogger(__name__)


def parse_iso_date(value: str) -> date:
    """Parse ``YYYY-MM-DD`` into a date.

    The string must split on ``-`` into exactly three integer components that
    form a real calendar date.
    """

    parts = value.split("-")
    if len(parts) != 3:
        raise InvalidDateFormatError(f"Date must be in YYYY-MM-DD format: {value!r}")
    try:
        year, month, day = (int(part) for part in parts)
    except ValueError as exc:
        raise InvalidDateFormatError(f"Date must be in YYYY-MM-DD format: {value!r}") from exc
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDateFormatError(f"Not a valid calendar date: {value!r}") from exc


def add_days(day: date, days: int) -> date:
    return day + timedelta(days=days)


def format_iso_date(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def today_in(timezone: str) -> date:
    """Return the current calendar date in ``timezone``, falling back to UTC."""

    try:
        zone = ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r; using UTC", timezone)
        zone = ZoneInfo("UTC")
    return datetime.now(zone).date()
