"""Models for the devices endpoint."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class AlertSetting(BaseModel):
    """The settings for a particular alert."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, hide_input_in_errors=True)

    alert_name: str = Field(..., alias="alertName")
    value: float = Field(..., description="Threshold value")
    unit: str = Field(..., description="Unit of the threshold")
    snooze: int = Field(..., description="Snooze in minutes")
    delay: int = Field(..., description="Delay in minutes")
    enabled: bool
    system_time: str = Field(..., alias="systemTime")
    display_time: str = Field(..., alias="displayTime")


class Device(BaseModel):
    """Device information and the alert settings for that device."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, hide_input_in_errors=True)

    model: str = Field(..., description="Model name of the receiver or app")
    last_upload_date: str = Field(..., alias="lastUploadDate")
    alert_settings: List[AlertSetting] = Field(default_factory=list, alias="alertSettings")


class DeviceResponse(BaseModel):
    """Response body of GET /v1/users/self/devices."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, hide_input_in_errors=True)

    devices: List[Device] = Field(default_factory=list)
