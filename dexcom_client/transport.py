"""HTTP transport shared by every Dexcom call.

``BaseClient`` resolves the API host once, sends requests through a single
``httpx.AsyncClient`` and hands back the raw status code and body. It never
looks at the status code; classifying responses is the caller's job. Any
failure to get a readable response is raised as ``DexcomRequestError``.
"""
from __future__ import annotations

import logging
import time
import uuid
from typing import Mapping, Optional, Tuple

import httpx

from dexcom_client.errors import DexcomRequestError
from dexcom_client.finder import Finder
from dexcom_client.metrics import dexcom_api_call_latency_seconds, dexcom_api_call_total
from dexcom_client.utils.logging_utils import redact_sensitive_data

logger = logging.getLogger(__name__)

__all__ = ["BaseClient"]


class BaseClient:
    """Thin async HTTP gateway bound to one resolved base address."""

    def __init__(
        self,
        finder: Finder,
        service_name: str,
        use_tls: bool,
        timeout: float,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.service_name = service_name
        self.base_url = finder(service_name, use_tls)
        self.timeout = timeout
        self.http_client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    # ---------------------- async context manager helpers ------------------
    async def __aenter__(self) -> "BaseClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        await self.aclose()

    async def aclose(self) -> None:
        """Close underlying HTTPX client."""
        await self.http_client.aclose()

    # ---------------------- request dispatch -------------------------------
    async def make_request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
        content: Optional[bytes | str] = None,
        correlation_id: Optional[str] = None,
    ) -> Tuple[int, bytes]:
        """
        Send one request and return ``(status_code, body)``.

        Raises:
            DexcomRequestError: if no response was received (timeout, DNS,
                connection refused, protocol error) or its body could not
                be read (corrupt content encoding, too many redirects).
        """
        correlation_id = correlation_id or str(uuid.uuid4())
        endpoint = "/" + path.lstrip("/")
        logger.info(
            "Dexcom API request",
            extra={
                "log_type": "request",
                "correlation_id": correlation_id,
                "method": method,
                "endpoint": endpoint,
                "headers": redact_sensitive_data(dict(headers or {})),
                "params": dict(params) if params else None,
            }
        )
        start_time = time.monotonic()
        status = "error"
        try:
            response = await self.http_client.request(
                method,
                endpoint,
                params=params,
                headers=headers,
                content=content,
            )
        except httpx.RequestError as exc:
            logger.warning(
                "Dexcom API request failed",
                extra={
                    "log_type": "request_error",
                    "correlation_id": correlation_id,
                    "method": method,
                    "endpoint": endpoint,
                    "error": repr(exc),
                }
            )
            raise DexcomRequestError(f"Request to {endpoint} failed: {exc!r}") from exc
        else:
            if response.is_success:
                status = "success"
            logger.info(
                "Dexcom API response",
                extra={
                    "log_type": "response",
                    "correlation_id": correlation_id,
                    "method": method,
                    "endpoint": endpoint,
                    "status_code": response.status_code,
                }
            )
            return response.status_code, response.content
        finally:
            latency = time.monotonic() - start_time
            dexcom_api_call_latency_seconds.labels(method=method, endpoint=endpoint).observe(latency)
            dexcom_api_call_total.labels(method=method, endpoint=endpoint, status=status).inc()
