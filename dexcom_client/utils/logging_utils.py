"""
Logging utilities for redacting credentials from logs and structuring output.

Example:
    from dexcom_client.utils.logging_utils import redact_sensitive_data
    safe = redact_sensitive_data({'access_token': 'abc', 'unit': 'mg/dL'})
    # safe == {'access_token': '***REDACTED***', 'unit': 'mg/dL'}
"""

import json
import logging
from datetime import datetime, timezone

SENSITIVE_KEYS = {
    'access_token',
    'refresh_token',
    'client_secret',
    'code',
    'authorization',
    'password',
    'secret',
    'token',
}

REDACTED = '***REDACTED***'

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = set(vars(logging.makeLogRecord({}))) | {'message', 'asctime'}


def redact_sensitive_data(obj):
    """
    Recursively redacts sensitive fields in dicts/lists.
    Keys are matched case-insensitively against SENSITIVE_KEYS.
    """
    if isinstance(obj, dict):
        return {
            k: (REDACTED if str(k).lower() in SENSITIVE_KEYS else redact_sensitive_data(v))
            for k, v in obj.items()
        }
    elif isinstance(obj, list):
        return [redact_sensitive_data(i) for i in obj]
    else:
        return obj


class JSONFormatter(logging.Formatter):
    """
    Formats log records as JSON with standard fields plus any ``extra`` values.
    """
    def format(self, record):
        log_record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS and key not in log_record:
                log_record[key] = value
        return json.dumps(log_record, default=str)


def setup_logging(level="INFO", fmt="json"):
    """
    Configure the root logger.
    Args:
        level: Logging level name or number
        fmt: 'json' for structured output, 'text' for the plain formatter
    """
    logger = logging.getLogger()
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    # Remove existing handlers
    for h in list(logger.handlers):
        logger.removeHandler(h)
    handler = logging.StreamHandler()
    if fmt == 'json':
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger
