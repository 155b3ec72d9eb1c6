"""
In-memory fake calendar and property store for testing.

Duck-type-compatible stand-ins for the calendar providers and property stores.
No Supabase project or data directory is required.
"""

from datetime import date
from typing import Mapping

from lens_tracker.domain import CalendarSyncError, ReminderEvent


class FakeCalendar:
    """In-memory calendar with per-operation failure switches."""

    def __init__(self, user_id: str = "user-1"):
        self.user_id = user_id
        self._events: dict[str, ReminderEvent] = {}
        self._next_id = 1
        self.fail_on: set[str] = set()
        self.creates: list[str] = []
        self.deletes: list[str] = []

    def _maybe_fail(self, operation: str):
        if operation in self.fail_on:
            raise CalendarSyncError(f"simulated {operation} failure")

    # ------------------------------------------------------------------ #
    # CalendarProvider interface                                            #
    # ------------------------------------------------------------------ #

    def create_all_day_event(self, title: str, day: date, *, description: str = "") -> ReminderEvent:
        self._maybe_fail("create")
        event_id = f"evt-{self._next_id}"
        self._next_id += 1
        event = ReminderEvent(id=event_id, user_id=self.user_id, title=title, day=day, description=description)
        self._events[event_id] = event
        self.creates.append(event_id)
        return event

    def get_event(self, event_id: str) -> ReminderEvent | None:
        self._maybe_fail("get")
        return self._events.get(event_id)

    def delete_event(self, event_id: str) -> bool:
        self._maybe_fail("delete")
        removed = self._events.pop(event_id, None)
        self.deletes.append(event_id)
        return removed is not None

    # ------------------------------------------------------------------ #
    # Test helpers                                                          #
    # ------------------------------------------------------------------ #

    @property
    def event_count(self) -> int:
        return len(self._events)

    def has_event(self, event_id: str) -> bool:
        return event_id in self._events

    def event(self, event_id: str) -> ReminderEvent:
        return self._events[event_id]


class BrokenCalendar:
    """A provider whose every call raises a non-calendar error."""

    def create_all_day_event(self, title, day, *, description=""):
        raise ConnectionError("calendar unreachable")

    def get_event(self, event_id):
        raise ConnectionError("calendar unreachable")

    def delete_event(self, event_id):
        raise ConnectionError("calendar unreachable")


class FakePropertyStore:
    """Dict-backed property store that counts batch writes."""

    def __init__(self, initial: Mapping[str, str] | None = None):
        self.values: dict[str, str] = dict(initial or {})
        self.writes: list[dict[str, str]] = []

    def get_properties(self) -> dict[str, str]:
        return dict(self.values)

    def set_properties(self, values: Mapping[str, str]) -> None:
        self.writes.append(dict(values))
        self.values.update(values)
