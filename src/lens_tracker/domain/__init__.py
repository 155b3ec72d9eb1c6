"""Domain models, errors, and date arithmetic for lens tracking."""

from __future__ import annotations

from .dates import add_days, format_iso_date, parse_iso_date, today_in
from .errors import CalendarSyncError, InvalidDateFormatError, LensTrackerError, MissingInputError
from .models import LensState, ReminderEvent, SyncResult

__all__ = [
    "CalendarSyncError",
    "InvalidDateFormatError",
    "LensState",
    "LensTrackerError",
    "MissingInputError",
    "ReminderEvent",
    "SyncResult",
    "add_days",
    "format_iso_date",
    "parse_iso_date",
    "today_in",
]
