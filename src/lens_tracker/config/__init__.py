"""Configuration models and helpers."""

from __future__ import annotations

from .settings import AppSettings, StorageSettings, SupabaseSettings, UiSettings, get_settings

__all__ = ["AppSettings", "StorageSettings", "SupabaseSettings", "UiSettings", "get_settings"]
