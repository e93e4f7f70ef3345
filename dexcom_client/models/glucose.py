"""Models for estimated glucose values."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class EGV(BaseModel):
    """A single estimated glucose value.

    ``status``, ``trend`` and ``trend_rate`` may be omitted or null in the API
    response. Both read back as ``None``; whether the key was sent at all is
    recorded in ``model_fields_set``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, hide_input_in_errors=True)

    system_time: str = Field(..., alias="systemTime")
    display_time: str = Field(..., alias="displayTime")
    value: float = Field(..., description="Glucose value in the response's unit")
    status: Optional[str] = None
    trend: Optional[str] = None
    trend_rate: Optional[float] = Field(None, alias="trendRate")

    def was_sent(self, field_name: str) -> bool:
        """Return True if ``field_name`` was present in the decoded body, even as null."""
        return field_name in self.model_fields_set


class EGVResponse(BaseModel):
    """Response body of GET /v1/users/self/egvs."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, hide_input_in_errors=True)

    unit: str = Field("", description="Unit of the glucose values")
    rate_unit: str = Field("", alias="rateUnit")
    egvs: List[EGV] = Field(default_factory=list)
