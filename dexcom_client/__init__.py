"""Async client for the Dexcom CGM web API."""

from dexcom_client.client import DexcomClient, format_api_time, new_client, new_sandbox_client
from dexcom_client.errors import (
    ERROR_API,
    ERROR_JSON,
    ERROR_MISSING_PARAM,
    ERROR_REQUEST,
    ERROR_RESOLVE,
    DexcomAPIError,
    DexcomDecodeError,
    DexcomError,
    DexcomMissingParamError,
    DexcomRequestError,
    DexcomResolutionError,
)
from dexcom_client.models import (
    EGV,
    AlertSetting,
    Device,
    DeviceResponse,
    EGVResponse,
    Event,
    EventResponse,
    MinMax,
    StatRequest,
    Statistics,
    UserToken,
)
from dexcom_client.utils.config import ClientConfig, Settings, get_settings

__version__ = "0.1.0"

__all__ = [
    "DexcomClient",
    "new_client",
    "new_sandbox_client",
    "format_api_time",
    "ClientConfig",
    "Settings",
    "get_settings",
    # errors
    "ERROR_API",
    "ERROR_JSON",
    "ERROR_MISSING_PARAM",
    "ERROR_REQUEST",
    "ERROR_RESOLVE",
    "DexcomError",
    "DexcomAPIError",
    "DexcomDecodeError",
    "DexcomMissingParamError",
    "DexcomRequestError",
    "DexcomResolutionError",
    # models
    "AlertSetting",
    "Device",
    "DeviceResponse",
    "EGV",
    "EGVResponse",
    "Event",
    "EventResponse",
    "MinMax",
    "StatRequest",
    "Statistics",
    "UserToken",
]
