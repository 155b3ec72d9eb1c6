from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Optional

from ..domain import (
    InvalidDateFormatError,
    LensState,
    MissingInputError,
    add_days,
    format_iso_date,
    parse_iso_date,
)
from .reminders import CalendarReminderSync
from .state_store import ReplacementStateStore

logger = logging.getLogger(__name__)

_LOCKS_GUARD = threading.Lock()
_USER_LOCKS: Dict[str, threading.Lock] = {}


def _lock_for(user_key: str) -> threading.Lock:
    with _LOCKS_GUARD:
        return _USER_LOCKS.setdefault(user_key, threading.Lock())


@dataclass(slots=True)
class LensTracker:
    """Entry point for reading and saving the lens replacement state.

    ``user_key`` selects the lock that serializes saves; trackers built for the
    same user share it.
    """

    store: ReplacementStateStore
    reminders: CalendarReminderSync
    user_key: str = "default"
    _lock: threading.Lock = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._lock = _lock_for(self.user_key)

    @property
    def duration_days(self) -> int:
        return self.store.duration_days

    def get_state(self) -> LensState:
        return self.store.read()

    def save_start_date(self, iso_date: Optional[str]) -> LensState:
        if iso_date is None or not str(iso_date).strip():
            raise MissingInputError("A start date is required.")

        start = parse_iso_date(str(iso_date).strip())
        try:
            replacement = add_days(start, self.duration_days)
        except OverflowError as exc:
            raise InvalidDateFormatError(f"Replacement date is out of range for {iso_date!r}") from exc
        start_iso = format_iso_date(start)
        replacement_iso = format_iso_date(replacement)

        with self._lock:
            result = self.reminders.upsert(start_iso, replacement)
            if not result.ok:
                logger.warning("Saving %s without a calendar reminder: %s", start_iso, result.error)
            state = self.store.write(start_iso, replacement_iso, result.event_id)

        logger.info("Saved lens start date %s; replace on %s", start_iso, replacement_iso)
        return state
