"""Models for user-logged events."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Event(BaseModel):
    """An event the user logged (carbs, insulin, exercise, health)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, hide_input_in_errors=True)

    system_time: str = Field(..., alias="systemTime")
    display_time: str = Field(..., alias="displayTime")
    event_type: str = Field(..., alias="eventType")
    event_sub_type: str = Field("", alias="eventSubType")
    value: float = 0.0
    unit: str = ""


class EventResponse(BaseModel):
    """Response body of GET /v1/users/self/events."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, hide_input_in_errors=True)

    events: List[Event] = Field(default_factory=list)
