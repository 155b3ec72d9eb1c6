"""Supabase repositories for user properties and reminder events."""

from __future__ import annotations

from .events import SupabaseCalendar
from .properties import SupabasePropertyStore

__all__ = ["SupabaseCalendar", "SupabasePropertyStore"]
