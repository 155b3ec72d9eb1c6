from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Protocol

from ..domain import ReminderEvent


class PropertyStore(Protocol):
    """User-scoped string key/value storage."""

    def get_properties(self) -> dict[str, str]: ...

    def set_properties(self, values: Mapping[str, str]) -> None:
        """Persist every entry of ``values`` as one batch."""
        ...


class CalendarProvider(Protocol):
    """The user's default calendar, limited to what reminders need."""

    def create_all_day_event(self, title: str, day: date, *, description: str = "") -> ReminderEvent: ...

    def get_event(self, event_id: str) -> Optional[ReminderEvent]: ...

    def delete_event(self, event_id: str) -> bool: ...
