"""Async client for the Dexcom (CGM) web API.

Every operation follows the same path: build the request, send it through
``BaseClient`` and pass the ``(status_code, body)`` pair to ``_execute``,
which either decodes it into the operation's model or raises a categorized
``DexcomError``.
"""
from __future__ import annotations

import json
import logging
import urllib.parse
import uuid
from datetime import datetime, timezone
from typing import Callable, Dict, Mapping, Optional, Sequence, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from dexcom_client.errors import DexcomAPIError, DexcomDecodeError, DexcomMissingParamError
from dexcom_client.finder import Finder, find_dexcom, find_dexcom_sandbox
from dexcom_client.models import (
    DeviceResponse,
    EGVResponse,
    EventResponse,
    StatRequest,
    Statistics,
    UserToken,
    build_statistics_body,
)
from dexcom_client.transport import BaseClient
from dexcom_client.utils.config import ClientConfig, Settings, get_settings
from dexcom_client.utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)

__all__ = [
    "DexcomClient",
    "format_api_time",
    "new_client",
    "new_sandbox_client",
]

T = TypeVar("T", bound=BaseModel)

SERVICE_NAME = "dexcom"

# grant types
GRANT_TYPE_AUTHORIZATION_CODE = "authorization_code"
GRANT_TYPE_REFRESH_TOKEN = "refresh_token"

# params
PARAM_CLIENT_ID = "client_id"
PARAM_CLIENT_SECRET = "client_secret"
PARAM_AUTHORIZATION_CODE = "code"
PARAM_GRANT_TYPE = "grant_type"
PARAM_REDIRECT_URI = "redirect_uri"
PARAM_REFRESH_TOKEN = "refresh_token"
PARAM_START_DATE = "startDate"
PARAM_END_DATE = "endDate"

# paths
LOGIN_PATH = "/v1/oauth2/login"
TOKEN_PATH = "/v1/oauth2/token"
DEVICES_PATH = "/v1/users/self/devices"
EGVS_PATH = "/v1/users/self/egvs"
EVENTS_PATH = "/v1/users/self/events"
STATISTICS_PATH = "/v1/users/self/statistics"

TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_api_time(value: datetime) -> str:
    """Format ``value`` the way the data endpoints expect: UTC, no offset suffix.

    Naive datetimes are taken to be UTC already.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(TIME_FORMAT)


class DexcomClient:
    """High-level async client for the Dexcom OAuth2 and data endpoints."""

    def __init__(
        self,
        config: ClientConfig,
        *,
        finder: Optional[Finder] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        """
        Initialize the Dexcom API client.
        :param config: Immutable client credentials, timeout and host selection
        :param finder: Overrides the host lookup; defaults to production or sandbox per ``config.sandbox``
        :param transport: Optional httpx transport, used by tests to stand in for the API
        :param clock: Source of "now" used to stamp token expiry
        """
        self.config = config
        if finder is None:
            finder = find_dexcom_sandbox if config.sandbox else find_dexcom
        self._clock = clock or _utcnow
        self._base = BaseClient(finder, SERVICE_NAME, True, config.timeout, transport=transport)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        *,
        configure_logging: bool = False,
        **kwargs,
    ) -> "DexcomClient":
        """Create a client from environment-backed settings.

        Pass ``configure_logging=True`` from an application entry point to also
        install the root log handler described by the settings.
        """
        settings = settings or get_settings()
        if configure_logging:
            setup_logging(settings.log_level, settings.log_format)
        return cls(ClientConfig.from_settings(settings), **kwargs)

    @property
    def base_url(self) -> httpx.URL:
        return self._base.base_url

    # ---------------------- async context manager helpers ------------------
    async def __aenter__(self) -> "DexcomClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying transport."""
        await self._base.aclose()

    # ---------------------- response interpretation ------------------------
    async def _execute(
        self,
        model: Type[T],
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
        content: Optional[bytes | str] = None,
    ) -> T:
        """Send a request and decode the response into ``model``.

        Transport failures propagate from ``BaseClient`` untouched. A 2xx body
        is validated against ``model``; anything else becomes a
        ``DexcomAPIError`` carrying the raw body, which is never parsed.
        """
        correlation_id = str(uuid.uuid4())
        status_code, body = await self._base.make_request(
            method,
            path,
            params=params,
            headers=headers,
            content=content,
            correlation_id=correlation_id,
        )
        if 200 <= status_code < 300:
            try:
                return model.model_validate_json(body)
            except ValidationError as exc:
                logger.error(
                    "Failed to decode Dexcom response",
                    extra={
                        "log_type": "decode_error",
                        "correlation_id": correlation_id,
                        "endpoint": path,
                        "status_code": status_code,
                        "model": model.__name__,
                    }
                )
                raise DexcomDecodeError(
                    f"Could not unmarshal response with code {status_code} | {exc}",
                    status_code=status_code,
                ) from exc

        response_body = body.decode("utf-8", errors="replace")
        logger.warning(
            "Dexcom API returned an error status",
            extra={
                "log_type": "api_error",
                "correlation_id": correlation_id,
                "endpoint": path,
                "status_code": status_code,
            }
        )
        raise DexcomAPIError(
            f"Status code was not in the 2xx range: {status_code}",
            status_code=status_code,
            response_body=response_body,
        )

    # ---------------------- OAuth2 operations ------------------------------
    def build_authorization_url(self, redirect_uri: str, state: Optional[str] = None) -> str:
        """
        Build the login URL the user is sent to in order to grant access.
        :param redirect_uri: The redirect URI registered with Dexcom
        :param state: Optional state parameter for CSRF protection
        :return: The full authorization URL
        """
        params: Dict[str, str] = {
            PARAM_CLIENT_ID: self.config.client_id,
            PARAM_REDIRECT_URI: redirect_uri,
            "response_type": "code",
            "scope": "offline_access",
        }
        if state:
            params["state"] = state
        # Append rather than join so a base path without a trailing slash is kept.
        login_url = self.base_url.copy_with(path=self.base_url.path.rstrip("/") + LOGIN_PATH, params=params)
        return str(login_url)

    async def _exchange_token(self, authorization_code: str, refresh_token: str, redirect_uri: str) -> UserToken:
        values = {
            PARAM_CLIENT_ID: self.config.client_id,
            PARAM_CLIENT_SECRET: self.config.client_secret.get_secret_value(),
            PARAM_REDIRECT_URI: redirect_uri,
        }
        if authorization_code:
            values[PARAM_AUTHORIZATION_CODE] = authorization_code
            values[PARAM_GRANT_TYPE] = GRANT_TYPE_AUTHORIZATION_CODE
        elif refresh_token:
            values[PARAM_REFRESH_TOKEN] = refresh_token
            values[PARAM_GRANT_TYPE] = GRANT_TYPE_REFRESH_TOKEN
        else:
            raise DexcomMissingParamError("authorization_code or refresh_token is missing")

        headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            "Cache-Control": "no-cache",
        }
        token = await self._execute(
            UserToken,
            "POST",
            TOKEN_PATH,
            headers=headers,
            content=urllib.parse.urlencode(values),
        )
        token.stamp_expiry(self._clock())
        return token

    async def get_user(self, authorization_code: str, redirect_uri: str) -> UserToken:
        """Exchange an authorization code for the user's tokens."""
        return await self._exchange_token(authorization_code, "", redirect_uri)

    async def refresh_user(self, refresh_token: str, redirect_uri: str) -> UserToken:
        """Trade a refresh token for a fresh set of tokens."""
        return await self._exchange_token("", refresh_token, redirect_uri)

    # ---------------------- data operations --------------------------------
    @staticmethod
    def _auth_headers(access_token: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {access_token}"}

    @staticmethod
    def _date_range(start_date: datetime, end_date: datetime) -> Dict[str, str]:
        return {
            PARAM_START_DATE: format_api_time(start_date),
            PARAM_END_DATE: format_api_time(end_date),
        }

    async def get_devices(self, access_token: str, start_date: datetime, end_date: datetime) -> DeviceResponse:
        """Fetch the user's devices and their alert settings."""
        return await self._execute(
            DeviceResponse,
            "GET",
            DEVICES_PATH,
            params=self._date_range(start_date, end_date),
            headers=self._auth_headers(access_token),
        )

    async def get_glucose_readings(self, access_token: str, start_date: datetime, end_date: datetime) -> EGVResponse:
        """Fetch estimated glucose values recorded between the two dates."""
        return await self._execute(
            EGVResponse,
            "GET",
            EGVS_PATH,
            params=self._date_range(start_date, end_date),
            headers=self._auth_headers(access_token),
        )

    get_egvs = get_glucose_readings

    async def get_events(self, access_token: str, start_date: datetime, end_date: datetime) -> EventResponse:
        """Fetch events the user logged between the two dates."""
        return await self._execute(
            EventResponse,
            "GET",
            EVENTS_PATH,
            params=self._date_range(start_date, end_date),
            headers=self._auth_headers(access_token),
        )

    async def get_statistics(
        self,
        access_token: str,
        start_date: datetime,
        end_date: datetime,
        stat_requests: Mapping[str, Sequence[StatRequest]],
    ) -> Statistics:
        """Compute the requested statistics over the date range."""
        headers = self._auth_headers(access_token)
        headers["Content-Type"] = "application/json"
        return await self._execute(
            Statistics,
            "POST",
            STATISTICS_PATH,
            params=self._date_range(start_date, end_date),
            headers=headers,
            content=json.dumps(build_statistics_body(stat_requests)),
        )


def new_client(client_id: str, client_secret: str, timeout: float, **kwargs) -> DexcomClient:
    """Return a client that talks to the production API."""
    config = ClientConfig(client_id=client_id, client_secret=client_secret, timeout=timeout, sandbox=False)
    return DexcomClient(config, **kwargs)


def new_sandbox_client(client_id: str, client_secret: str, timeout: float, **kwargs) -> DexcomClient:
    """Return a client that talks to the Dexcom sandbox."""
    config = ClientConfig(client_id=client_id, client_secret=client_secret, timeout=timeout, sandbox=True)
    return DexcomClient(config, **kwargs)
