"""HTTP services for Lens Tracker."""

from .server import app, build_manifest, get_tracker, run_local_server

__all__ = [
    "app",
    "build_manifest",
    "get_tracker",
    "run_local_server",
]
