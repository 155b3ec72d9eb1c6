from __future__ import annotations


class LensTrackerError(Exception):
    """Base exception for lens tracker errors."""


class MissingInputError(LensTrackerError, ValueError):
    """Raised when a save is attempted without a start date."""


class InvalidDateFormatError(LensTrackerError, ValueError):
    """Raised when a start date is not a well-formed ``YYYY-MM-DD`` calendar date."""


class CalendarSyncError(LensTrackerError):
    """Raised by calendar providers when an event operation fails."""
