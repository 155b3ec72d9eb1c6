from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain import LensState


class LensStatePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start_date: str = Field(default="", alias="startDate")
    replacement_date: str = Field(default="", alias="replacementDate")
    duration_days: int = Field(alias="durationDays")
    calendar_event_id: str = Field(default="", alias="calendarEventId")
    timezone: str

    @classmethod
    def from_domain(cls, state: LensState) -> "LensStatePayload":
        return cls(
            start_date=state.start_date,
            replacement_date=state.replacement_date,
            duration_days=state.duration_days,
            calendar_event_id=state.calendar_event_id,
            timezone=state.timezone,
        )


class StartDateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start_date: Optional[str] = Field(default=None, alias="startDate")
