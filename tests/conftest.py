"""Global test fixtures and configuration."""

import json
from datetime import datetime, timezone

import httpx
import pytest
import pytest_asyncio

from dexcom_client.client import DexcomClient
from dexcom_client.utils.config import ClientConfig

TEST_CLIENT_ID = "123"
TEST_CLIENT_SECRET = "abc"
FIXED_NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


class RecordingHandler:
    """Stand-in for the Dexcom API that records every request it receives."""

    def __init__(self, status_code=200, body=b"", exc=None):
        self.status_code = status_code
        self.body = body if isinstance(body, bytes) else body.encode()
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, content=self.body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def fixed_now():
    """The moment the test clock reports."""
    return FIXED_NOW


@pytest.fixture
def client_config():
    """Create a client config with test credentials."""
    return ClientConfig(client_id=TEST_CLIENT_ID, client_secret=TEST_CLIENT_SECRET, timeout=5.0)


@pytest_asyncio.fixture
async def make_client(client_config):
    """Factory building a DexcomClient whose transport is a RecordingHandler."""
    clients = []

    def _make(status_code=200, body=b"", exc=None, clock=lambda: FIXED_NOW):
        handler = RecordingHandler(status_code=status_code, body=body, exc=exc)
        client = DexcomClient(client_config, transport=httpx.MockTransport(handler), clock=clock)
        clients.append(client)
        return client, handler

    yield _make

    for client in clients:
        await client.aclose()


@pytest.fixture
def token_body():
    return json.dumps({
        "access_token": "access",
        "expires_in": 600,
        "token_type": "Bearer",
        "refresh_token": "refresh",
    })


@pytest.fixture
def devices_body():
    return json.dumps({
        "devices": [
            {
                "model": "G6 Mobile App",
                "lastUploadDate": "2024-02-29T10:05:00",
                "alertSettings": [
                    {
                        "alertName": "high",
                        "value": 200,
                        "unit": "mg/dL",
                        "snooze": 120,
                        "delay": 0,
                        "enabled": True,
                        "systemTime": "2024-02-01T08:00:00",
                        "displayTime": "2024-02-01T00:00:00",
                    },
                    {
                        "alertName": "low",
                        "value": 70,
                        "unit": "mg/dL",
                        "snooze": 30,
                        "delay": 0,
                        "enabled": False,
                        "systemTime": "2024-02-01T08:00:00",
                        "displayTime": "2024-02-01T00:00:00",
                    },
                ],
            }
        ]
    })


@pytest.fixture
def egvs_body():
    return json.dumps({
        "unit": "mg/dL",
        "rateUnit": "mg/dL/min",
        "egvs": [
            {
                "systemTime": "2024-02-29T10:05:00",
                "displayTime": "2024-02-29T02:05:00",
                "value": 112,
                "status": None,
                "trend": "flat",
                "trendRate": -0.3,
            },
            {
                "systemTime": "2024-02-29T10:00:00",
                "displayTime": "2024-02-29T02:00:00",
                "value": 115,
            },
        ],
    })


@pytest.fixture
def events_body():
    return json.dumps({
        "events": [
            {
                "systemTime": "2024-02-29T12:00:00",
                "displayTime": "2024-02-29T04:00:00",
                "eventType": "exercise",
                "eventSubType": "medium",
                "value": 30,
                "unit": "minutes",
            }
        ]
    })


@pytest.fixture
def statistics_payload():
    return {
        "hypoglycemiaRisk": "minimal",
        "min": 55,
        "max": 288,
        "mean": 142.7,
        "median": 138,
        "variance": 1804.33,
        "stdDev": 42.477,
        "sum": 577148.5,
        "q1": 112,
        "q2": 138,
        "q3": 167.25,
        "utilizationPercent": 97.8,
        "meanDailyCalibrations": 0.1,
        "nDays": 14,
        "nValues": 4044,
        "nBelowRange": 61,
        "nWithinRange": 2813,
        "nAboveRange": 1170,
        "percentBelowRange": 1.508,
        "percentWithinRange": 69.56,
        "percentAboveRange": 28.932,
    }
