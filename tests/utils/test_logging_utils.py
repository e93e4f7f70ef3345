import json
import logging

from dexcom_client.utils.logging_utils import (
    REDACTED,
    JSONFormatter,
    redact_sensitive_data,
    setup_logging,
)


def test_redact_sensitive_data_nested():
    data = {
        "client_id": "123",
        "client_secret": "abc",
        "Authorization": "Bearer xyz",
        "tokens": [{"access_token": "a", "refresh_token": "r", "expires_in": 600}],
    }

    assert redact_sensitive_data(data) == {
        "client_id": "123",
        "client_secret": REDACTED,
        "Authorization": REDACTED,
        "tokens": [{"access_token": REDACTED, "refresh_token": REDACTED, "expires_in": 600}],
    }


def test_redact_leaves_scalars_alone():
    assert redact_sensitive_data("Bearer xyz") == "Bearer xyz"
    assert redact_sensitive_data(None) is None


def test_json_formatter_includes_extra_fields():
    record = logging.makeLogRecord({
        "name": "dexcom_client.transport",
        "levelname": "INFO",
        "msg": "Dexcom API request",
        "log_type": "request",
        "correlation_id": "cid-1",
    })

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "Dexcom API request"
    assert payload["level"] == "INFO"
    assert payload["log_type"] == "request"
    assert payload["correlation_id"] == "cid-1"
    assert "msg" not in payload


def test_setup_logging_replaces_handlers():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        logger = setup_logging("debug", "text")
        assert logger is root
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0].formatter, JSONFormatter)

        setup_logging("INFO", "json")
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
