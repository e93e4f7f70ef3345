"""Models for the statistics endpoint."""

from datetime import datetime
from typing import Any, Dict, List, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field


class MinMax(BaseModel):
    """Glucose range bounds."""

    model_config = ConfigDict(frozen=True, hide_input_in_errors=True)

    min: float
    max: float


class StatRequest(BaseModel):
    """A named statistic over a glucose range and time-of-day window."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, hide_input_in_errors=True)

    name: str
    start_time: datetime = Field(..., alias="startTime")
    end_time: datetime = Field(..., alias="endTime")
    egv_range: MinMax = Field(..., alias="egvrange")


class Statistics(BaseModel):
    """Response body of POST /v1/users/self/statistics."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, hide_input_in_errors=True)

    hypoglycemia_risk: str = Field(..., alias="hypoglycemiaRisk")
    min: float
    max: float
    mean: float
    median: float
    variance: float
    std_dev: float = Field(..., alias="stdDev")
    sum: float
    q1: float
    q2: float
    q3: float
    utilization_percent: float = Field(..., alias="utilizationPercent")
    mean_daily_calibrations: float = Field(..., alias="meanDailyCalibrations")
    n_days: int = Field(..., alias="nDays")
    n_values: int = Field(..., alias="nValues")
    n_below_range: int = Field(..., alias="nBelowRange")
    n_within_range: int = Field(..., alias="nWithinRange")
    n_above_range: int = Field(..., alias="nAboveRange")
    percent_below_range: float = Field(..., alias="percentBelowRange")
    percent_within_range: float = Field(..., alias="percentWithinRange")
    percent_above_range: float = Field(..., alias="percentAboveRange")


def build_statistics_body(stat_requests: Mapping[str, Sequence[StatRequest]]) -> Dict[str, List[Dict[str, Any]]]:
    """Convert a group-name -> requests mapping into the JSON-ready request body."""
    return {
        group: [request.model_dump(mode="json", by_alias=True) for request in requests]
        for group, requests in stat_requests.items()
    }
