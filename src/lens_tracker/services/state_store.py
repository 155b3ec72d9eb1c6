from __future__ import annotations

from dataclasses import dataclass

from ..core import LENS_DURATION_DAYS
from ..data import PropertyStore
from ..domain import LensState

START_DATE_KEY = "CONTACT_LENS_START_DATE_ISO"
REPLACEMENT_DATE_KEY = "CONTACT_LENS_REPLACEMENT_DATE_ISO"
EVENT_ID_KEY = "CONTACT_LENS_EVENT_ID"


@dataclass(slots=True)
class ReplacementStateStore:
    """Reads and writes the three persisted lens fields as one record."""

    properties: PropertyStore
    timezone: str = "UTC"
    duration_days: int = LENS_DURATION_DAYS

    def read(self) -> LensState:
        values = self.properties.get_properties()
        return LensState(
            start_date=values.get(START_DATE_KEY) or "",
            replacement_date=values.get(REPLACEMENT_DATE_KEY) or "",
            calendar_event_id=values.get(EVENT_ID_KEY) or "",
            duration_days=self.duration_days,
            timezone=self.timezone,
        )

    def read_event_id(self) -> str:
        return self.properties.get_properties().get(EVENT_ID_KEY) or ""

    def write(self, start_date: str, replacement_date: str, calendar_event_id: str) -> LensState:
        self.properties.set_properties(
            {
                START_DATE_KEY: start_date,
                REPLACEMENT_DATE_KEY: replacement_date,
                EVENT_ID_KEY: calendar_event_id or "",
            }
        )
        return LensState(
            start_date=start_date,
            replacement_date=replacement_date,
            calendar_event_id=calendar_event_id or "",
            duration_days=self.duration_days,
            timezone=self.timezone,
        )
