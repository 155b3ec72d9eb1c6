from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

STORAGE_BACKENDS = ("local", "supabase")


@dataclass(frozen=True)
class SupabaseSettings:
    url: Optional[str]
    anon_key: Optional[str]
    email: Optional[str]
    password: Optional[str]

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self.anon_key)

    @property
    def has_credentials(self) -> bool:
        return bool(self.email and self.password)

    @property
    def missing_env_vars(self) -> list[str]:
        missing = []
        if not self.url:
            missing.append("SUPABASE_URL")
        if not self.anon_key:
            missing.append("SUPABASE_ANON_KEY")
        if not self.email:
            missing.append("SUPABASE_EMAIL")
        if not self.password:
            missing.append("SUPABASE_PASSWORD")
        return missing


@dataclass(frozen=True)
class StorageSettings:
    backend: str
    local_user: str
    properties_table: str
    events_table: str


@dataclass(frozen=True)
class UiSettings:
    app_name: str
    short_name: str
    timezone: str
    theme_color: str
    background_color: str


@dataclass(frozen=True)
class AppSettings:
    supabase: SupabaseSettings
    storage: StorageSettings
    ui: UiSettings
    log_level: str


def _backend_from_env() -> str:
    raw = (os.getenv("LENS_STORAGE_BACKEND") or "local").strip().lower()
    if raw not in STORAGE_BACKENDS:
        raise ValueError(f"LENS_STORAGE_BACKEND must be one of {', '.join(STORAGE_BACKENDS)}; got {raw!r}")
    return raw


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    supabase = SupabaseSettings(
        url=os.getenv("SUPABASE_URL"),
        anon_key=os.getenv("SUPABASE_ANON_KEY"),
        email=os.getenv("SUPABASE_EMAIL"),
        password=os.getenv("SUPABASE_PASSWORD"),
    )

    storage = StorageSettings(
        backend=_backend_from_env(),
        local_user=os.getenv("LENS_LOCAL_USER", "local"),
        properties_table=os.getenv("SUPABASE_PROPERTIES_TABLE", "user_properties"),
        events_table=os.getenv("SUPABASE_EVENTS_TABLE", "reminder_events"),
    )

    ui = UiSettings(
        app_name=os.getenv("LENS_APP_NAME", "2-Week Lens Tracker"),
        short_name=os.getenv("LENS_APP_SHORT_NAME", "Lens Tracker"),
        timezone=os.getenv("LENS_TIMEZONE", "UTC"),
        theme_color="#0f172a",
        background_color="#0f172a",
    )

    return AppSettings(
        supabase=supabase,
        storage=storage,
        ui=ui,
        log_level=os.getenv("LENS_LOG_LEVEL", "INFO").upper(),
    )
