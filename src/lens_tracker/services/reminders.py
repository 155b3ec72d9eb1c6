from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from ..data import CalendarProvider
from ..domain import SyncResult
from .state_store import ReplacementStateStore

logger = logging.getLogger(__name__)

EVENT_TITLE = "Contact lens exchange"


def event_description(start_iso: str) -> str:
    return f"Replacement day for your 2-week contact lenses.\nStart date: {start_iso}"


@dataclass(slots=True)
class CalendarReminderSync:
    """Keeps a single all-day reminder on the calendar for the replacement date.

    Calendar work is best effort: failures are logged and reported through the
    returned :class:`SyncResult`, never raised.
    """

    calendar: CalendarProvider
    state: ReplacementStateStore

    def upsert(self, start_iso: str, replacement_day: date) -> SyncResult:
        previous_id = self.state.read_event_id()
        if previous_id:
            self._remove_previous(previous_id)

        try:
            event = self.calendar.create_all_day_event(
                EVENT_TITLE,
                replacement_day,
                description=event_description(start_iso),
            )
        except Exception as exc:  # noqa: BLE001
            logger.error("Failed to create reminder event for %s: %s", replacement_day.isoformat(), exc)
            return SyncResult.failure(str(exc) or type(exc).__name__)

        logger.info("Created reminder event %s on %s", event.id, replacement_day.isoformat())
        return SyncResult(event_id=event.id)

    def _remove_previous(self, event_id: str) -> None:
        try:
            existing = self.calendar.get_event(event_id)
            if existing is None:
                logger.debug("Previous reminder event %s no longer exists", event_id)
                return
            self.calendar.delete_event(existing.id)
            logger.info("Deleted previous reminder event %s", event_id)
        except Exception as exc:  # noqa: BLE001
            # The old event may linger; a new one is still created.
            logger.warning("Failed to delete previous reminder event %s: %s", event_id, exc)
