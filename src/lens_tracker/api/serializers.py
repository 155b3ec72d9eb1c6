from __future__ import annotations

from typing import Any, Dict

from ..domain import LensState
from .models import LensStatePayload


def serialize_state(state: LensState) -> Dict[str, Any]:
    return LensStatePayload.from_domain(state).model_dump(by_alias=True)
