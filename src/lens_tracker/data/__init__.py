"""Data access layer."""

from __future__ import annotations

from .base import CalendarProvider, PropertyStore
from .local import JsonCalendar, JsonPropertyStore
from .supabase import SupabaseGateway, SupabaseNotInitializedError, SupabaseSessionMissingError

__all__ = [
    "CalendarProvider",
    "JsonCalendar",
    "JsonPropertyStore",
    "PropertyStore",
    "SupabaseGateway",
    "SupabaseNotInitializedError",
    "SupabaseSessionMissingError",
]
