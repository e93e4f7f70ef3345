"""Error categories raised by the Dexcom client."""
from __future__ import annotations

ERROR_API = "ERROR_API"
ERROR_JSON = "ERROR_JSON"
ERROR_MISSING_PARAM = "ERROR_MISSING_PARAM"
ERROR_REQUEST = "ERROR_REQUEST"
ERROR_RESOLVE = "ERROR_RESOLVE"

__all__ = [
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
]


class DexcomError(Exception):
    """Base class for every error the client raises.

    ``code`` identifies the category so callers can branch on it without
    importing each subclass.
    """

    code = "ERROR_UNKNOWN"

    def __init__(self, message: str, status_code: int | None = None, response_body: str | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_body = response_body

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r}, status_code={self.status_code!r})"


class DexcomMissingParamError(DexcomError):
    """A required argument was empty; no request was sent."""

    code = ERROR_MISSING_PARAM


class DexcomRequestError(DexcomError):
    """The request never produced a readable HTTP response (timeout, connection failure, corrupt body)."""

    code = ERROR_REQUEST


class DexcomAPIError(DexcomError):
    """The API answered with a status code outside the 2xx range."""

    code = ERROR_API


class DexcomDecodeError(DexcomError):
    """A 2xx response body could not be decoded into the expected model."""

    code = ERROR_JSON


class DexcomResolutionError(DexcomError):
    """The base address for the API could not be resolved."""

    code = ERROR_RESOLVE
