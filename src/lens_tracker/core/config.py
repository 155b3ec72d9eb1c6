from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "Lens Tracker"
APP_AUTHOR = "LensTracker"
DATA_DIR = Path(os.getenv("LENS_DATA_DIR") or user_data_dir(APP_NAME, APP_AUTHOR))
PROPERTIES_FILE = DATA_DIR / "properties.json"
CALENDAR_FILE = DATA_DIR / "calendar.json"

# Two-week lenses.
LENS_DURATION_DAYS = 14


def ensure_data_dir() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
