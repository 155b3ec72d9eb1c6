"""JSON-file backends for running without Supabase."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Dict, Mapping, Optional
from uuid import uuid4

import orjson

from ..domain import CalendarSyncError, ReminderEvent

logger = logging.getLogger(__name__)


@dataclass
class JsonDocument:
    """A JSON object on disk, replaced whole on every write."""

    path: Path

    def load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        raw = self.path.read_bytes()
        return dict(orjson.loads(raw)) if raw.strip() else {}

    def dump(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_bytes(orjson.dumps(data, option=orjson.OPT_INDENT_2) + b"\n")
        tmp_path.replace(self.path)


class JsonPropertyStore:
    """Per-user string properties kept under ``{"users": {user_id: {...}}}``."""

    def __init__(self, path: Path, user_id: str) -> None:
        self._document = JsonDocument(path)
        self.user_id = user_id

    def get_properties(self) -> dict[str, str]:
        users = self._document.load().get("users", {})
        return {str(key): str(value) for key, value in users.get(self.user_id, {}).items()}

    def set_properties(self, values: Mapping[str, str]) -> None:
        data = self._document.load()
        users = data.setdefault("users", {})
        users.setdefault(self.user_id, {}).update({key: str(value) for key, value in values.items()})
        self._document.dump(data)


class JsonCalendar:
    """A local calendar of all-day events, shared by all users of the file."""

    def __init__(self, path: Path, user_id: str) -> None:
        self._document = JsonDocument(path)
        self.user_id = user_id

    def _load(self) -> Dict[str, Any]:
        try:
            return self._document.load()
        except (OSError, orjson.JSONDecodeError) as exc:
            raise CalendarSyncError(f"Failed to read calendar file {self._document.path}: {exc}") from exc

    def _dump(self, data: Dict[str, Any]) -> None:
        try:
            self._document.dump(data)
        except OSError as exc:
            raise CalendarSyncError(f"Failed to write calendar file {self._document.path}: {exc}") from exc

    def create_all_day_event(self, title: str, day: date, *, description: str = "") -> ReminderEvent:
        event = ReminderEvent(
            id=uuid4().hex,
            user_id=self.user_id,
            title=title,
            day=day,
            description=description,
            created_at=datetime.now(timezone.utc),
        )
        data = self._load()
        data.setdefault("events", {})[event.id] = event.to_record()
        self._dump(data)
        logger.debug("Created local event %s on %s", event.id, day.isoformat())
        return event

    def get_event(self, event_id: str) -> Optional[ReminderEvent]:
        record = self._load().get("events", {}).get(event_id)
        if not record or record.get("user_id") != self.user_id:
            return None
        return ReminderEvent.from_record(record)

    def delete_event(self, event_id: str) -> bool:
        data = self._load()
        events = data.get("events", {})
        record = events.get(event_id)
        if not record or record.get("user_id") != self.user_id:
            return False
        del events[event_id]
        self._dump(data)
        return True

