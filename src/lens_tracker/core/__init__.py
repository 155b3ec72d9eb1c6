"""Core constants and filesystem locations."""

from .config import (
    APP_AUTHOR,
    APP_NAME,
    DATA_DIR,
    LENS_DURATION_DAYS,
    PROPERTIES_FILE,
    CALENDAR_FILE,
    ensure_data_dir,
)

__all__ = [
    "APP_AUTHOR",
    "APP_NAME",
    "CALENDAR_FILE",
    "DATA_DIR",
    "LENS_DURATION_DAYS",
    "PROPERTIES_FILE",
    "ensure_data_dir",
]
