from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional
from uuid import uuid4

from supabase import PostgrestAPIError

from ...domain import CalendarSyncError, ReminderEvent
from ..supabase import SupabaseGateway


@dataclass(slots=True)
class SupabaseCalendar:
    """All-day reminder events stored in a Supabase table."""

    gateway: SupabaseGateway
    table_name: str

    def create_all_day_event(self, title: str, day: date, *, description: str = "") -> ReminderEvent:
        event = ReminderEvent(
            id=str(uuid4()),
            user_id=self.gateway.current_user_id(),
            title=title,
            day=day,
            description=description,
        )
        try:
            response = self.gateway.table(self.table_name).insert(event.to_record()).execute()
        except PostgrestAPIError as exc:
            raise CalendarSyncError(f"Failed to create event: {exc.message}") from exc
        records = response.data or []
        return ReminderEvent.from_record(records[0]) if records else event

    def get_event(self, event_id: str) -> Optional[ReminderEvent]:
        try:
            response = (
                self.gateway
                .table(self.table_name)
                .select("*")
                .eq("id", event_id)
                .eq("user_id", self.gateway.current_user_id())
                .limit(1)
                .execute()
            )
        except PostgrestAPIError as exc:
            raise CalendarSyncError(f"Failed to fetch event {event_id}: {exc.message}") from exc
        records = response.data or []
        if not records:
            return None
        return ReminderEvent.from_record(records[0])

    def delete_event(self, event_id: str) -> bool:
        try:
            response = (
                self.gateway
                .table(self.table_name)
                .delete()
                .eq("id", event_id)
                .eq("user_id", self.gateway.current_user_id())
                .execute()
            )
        except PostgrestAPIError as exc:
            raise CalendarSyncError(f"Failed to delete event {event_id}: {exc.message}") from exc
        deleted = response.data or []
        return bool(deleted)
