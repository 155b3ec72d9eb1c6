from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

from ..core import LENS_DURATION_DAYS


def _parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    raise ValueError(f"Unsupported date value: {value!r}")


def _parse_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    raise ValueError(f"Unsupported datetime value: {value!r}")


@dataclass(frozen=True, slots=True)
class LensState:
    start_date: str = ""
    replacement_date: str = ""
    calendar_event_id: str = ""
    duration_days: int = LENS_DURATION_DAYS
    timezone: str = "UTC"

    @property
    def is_set(self) -> bool:
        return bool(self.start_date)


@dataclass(slots=True)
class ReminderEvent:
    """An all-day calendar entry."""

    id: str
    user_id: str
    title: str
    day: date
    description: str = ""
    all_day: bool = True
    created_at: Optional[datetime] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "ReminderEvent":
        return cls(
            id=str(record["id"]),
            user_id=str(record["user_id"]),
            title=str(record["title"]),
            day=_parse_date(record["event_date"]),
            description=record.get("description") or "",
            all_day=bool(record.get("all_day", True)),
            created_at=_parse_datetime(record["created_at"]) if record.get("created_at") else None,
        )

    def to_record(self) -> Dict[str, Any]:
        record = {
            "id": self.id,
            "user_id": self.user_id,
            "title": self.title,
            "event_date": self.day.isoformat(),
            "description": self.description,
            "all_day": self.all_day,
        }
        if self.created_at is not None:
            record["created_at"] = self.created_at.isoformat()
        return record


@dataclass(frozen=True, slots=True)
class SyncResult:
    """Outcome of a reminder sync: an event id, or the reason there is none."""

    event_id: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return bool(self.event_id) and self.error is None

    @classmethod
    def failure(cls, reason: str) -> "SyncResult":
        return cls(event_id="", error=reason)
