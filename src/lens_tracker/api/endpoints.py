from __future__ import annotations

from typing import Any, Dict, Optional

from .registry import register_api
from .serializers import serialize_state
from .state import api_state


@register_api(
    "get_state",
    description="Return the recorded lens start date, replacement date, duration, reminder event id, and timezone.",
    category="lenses",
    tags=("read",),
)
def get_state() -> Dict[str, Any]:
    return serialize_state(api_state.tracker.get_state())


@register_api(
    "save_start_date",
    description=(
        "Record the start date (YYYY-MM-DD) of a new pair of lenses, compute the replacement date, "
        "and replace the calendar reminder."
    ),
    category="lenses",
    tags=("write", "calendar"),
)
def save_start_date(start_date: Optional[str] = None) -> Dict[str, Any]:
    return serialize_state(api_state.tracker.save_start_date(start_date))
