from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..config import AppSettings, get_settings
from ..core import CALENDAR_FILE, PROPERTIES_FILE
from ..data import CalendarProvider, JsonCalendar, JsonPropertyStore, PropertyStore, SupabaseGateway
from ..data.repositories import SupabaseCalendar, SupabasePropertyStore
from .reminders import CalendarReminderSync
from .state_store import ReplacementStateStore
from .tracker import LensTracker


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root wiring settings to the storage and calendar backends."""

    settings: AppSettings = field(default_factory=get_settings)
    gateway: Optional[SupabaseGateway] = field(init=False, default=None)
    properties: PropertyStore = field(init=False)
    calendar: CalendarProvider = field(init=False)

    def __post_init__(self) -> None:
        storage = self.settings.storage
        if storage.backend == "supabase":
            self.gateway = SupabaseGateway(self.settings.supabase)
            self.properties = SupabasePropertyStore(gateway=self.gateway, table_name=storage.properties_table)
            self.calendar = SupabaseCalendar(gateway=self.gateway, table_name=storage.events_table)
        else:
            self.properties = JsonPropertyStore(PROPERTIES_FILE, storage.local_user)
            self.calendar = JsonCalendar(CALENDAR_FILE, storage.local_user)

    @property
    def user_key(self) -> str:
        if self.gateway is not None:
            return f"supabase:{self.settings.supabase.email or ''}"
        return f"local:{self.settings.storage.local_user}"

    def build_tracker(self) -> LensTracker:
        store = ReplacementStateStore(self.properties, timezone=self.settings.ui.timezone)
        reminders = CalendarReminderSync(calendar=self.calendar, state=store)
        return LensTracker(store=store, reminders=reminders, user_key=self.user_key)
