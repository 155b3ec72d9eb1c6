from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import AppSettings
from .core import DATA_DIR, ensure_data_dir

# Supabase talks through httpx; its per-request lines drown out the app's own.
_NOISY_LOGGERS = ("httpx", "httpcore", "hpack")

_INITIALIZED = False


def configure_logging(settings: AppSettings, *, log_path: Optional[Path] = None) -> Optional[Path]:
    """Attach a rotating file handler and a console handler to the root logger.

    Returns the log file path, or ``None`` when logging was already configured.
    """

    global _INITIALIZED
    if _INITIALIZED:
        return None

    if log_path is None:
        ensure_data_dir()
        log_path = DATA_DIR / "lens_tracker.log"
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler = RotatingFileHandler(str(log_path), maxBytes=1_000_000, backupCount=5, encoding="utf-8")
    console_handler = logging.StreamHandler()
    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.log_level, logging.INFO))
    root.addHandler(file_handler)
    root.addHandler(console_handler)
    if settings.log_level != "DEBUG":
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    _INITIALIZED = True
    logging.getLogger(__name__).debug("Logging configured. Output file: %s", log_path)
    return log_path


__all__ = ["configure_logging"]
