"""Templates bundled with the web app."""

from __future__ import annotations

from importlib import resources
from pathlib import Path


def templates_dir() -> Path:
    """Directory holding the page and service-worker templates."""

    return Path(str(resources.files(__name__).joinpath("templates")))
