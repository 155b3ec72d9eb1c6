"""Application services orchestrating storage, calendar, and date logic."""

from __future__ import annotations

from .context import ServiceContext
from .reminders import EVENT_TITLE, CalendarReminderSync
from .state_store import ReplacementStateStore
from .tracker import LensTracker

__all__ = ["EVENT_TITLE", "CalendarReminderSync", "LensTracker", "ReplacementStateStore", "ServiceContext"]
