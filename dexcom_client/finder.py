"""Base address lookup for the Dexcom API hosts."""
from typing import Callable

import httpx

from dexcom_client.errors import DexcomResolutionError

PRODUCTION_URL = "https://api.dexcom.com/"
SANDBOX_URL = "https://sandbox-api.dexcom.com/"

Finder = Callable[[str, bool], httpx.URL]


def _parse(raw: str) -> httpx.URL:
    try:
        return httpx.URL(raw)
    except httpx.InvalidURL as exc:
        raise DexcomResolutionError(f"Could not parse base URL {raw!r}") from exc


def find_dexcom(service_name: str, use_tls: bool) -> httpx.URL:
    """Return the production host. Dexcom is only served over TLS, so ``use_tls`` is ignored."""
    return _parse(PRODUCTION_URL)


def find_dexcom_sandbox(service_name: str, use_tls: bool) -> httpx.URL:
    """Return the sandbox host."""
    return _parse(SANDBOX_URL)


def static_finder(url: str) -> Finder:
    """Build a finder that always resolves to ``url`` (local stubs, proxies)."""

    def _find(service_name: str, use_tls: bool) -> httpx.URL:
        return _parse(url)

    return _find
