from __future__ import annotations

from dataclasses import dataclass, field

from ..services import LensTracker, ServiceContext


@dataclass(slots=True)
class ApiState:
    context: ServiceContext = field(default_factory=ServiceContext)
    tracker: LensTracker = field(init=False)

    def __post_init__(self) -> None:
        self.tracker = self.context.build_tracker()


api_state = ApiState()
