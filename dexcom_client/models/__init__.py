"""Pydantic models for Dexcom API requests and responses."""

from dexcom_client.models.devices import (
    AlertSetting,
    Device,
    DeviceResponse
)
from dexcom_client.models.events import (
    Event,
    EventResponse
)
from dexcom_client.models.glucose import (
    EGV,
    EGVResponse
)
from dexcom_client.models.statistics import (
    MinMax,
    StatRequest,
    Statistics,
    build_statistics_body
)
from dexcom_client.models.tokens import (
    EXPIRY_BUFFER,
    UserToken
)

__all__ = [
    # Device models
    "AlertSetting",
    "Device",
    "DeviceResponse",

    # Glucose models
    "EGV",
    "EGVResponse",

    # Event models
    "Event",
    "EventResponse",

    # Statistics models
    "MinMax",
    "StatRequest",
    "Statistics",
    "build_statistics_body",

    # Token models
    "EXPIRY_BUFFER",
    "UserToken"
]
