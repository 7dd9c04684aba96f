"""Async HTTP transport with status evaluation."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from ..config import ApodClientConfig
from .errors import ApodDecodeError, ApodTransportError
from .response_parsing import (
    is_success_status,
    parse_json_payload,
    remote_error_from_response,
)
from .transport_shared import build_default_headers, build_default_timeout
from .url_builder import redact_url

logger = logging.getLogger("apod_client")


class AsyncTransportClient(Protocol):
    async def get(self, url: str) -> object: ...
    async def aclose(self) -> None: ...


class AsyncTransport:
    """Asynchronous transport for the APOD API.

    Issues exactly one GET per ``request`` call; there is no retry loop.
    """

    def __init__(
        self,
        config: ApodClientConfig,
        *,
        client: AsyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "aclose"):
            await self._client.aclose()

    async def request(self, url: str) -> object:
        if self._closed:
            raise ApodTransportError("transport is already closed", cause="closed")

        safe_url = redact_url(url)
        logger.debug("request start url=%s", safe_url)
        try:
            response = await self._client.get(url)
        except Exception as exc:
            logger.error(
                "request network error url=%s error=%s",
                safe_url,
                exc.__class__.__name__,
            )
            raise ApodTransportError(
                "network/transport error",
                cause="network",
            ) from exc

        http_status = getattr(response, "status_code", None)
        logger.debug("response received url=%s http_status=%s", safe_url, http_status)
        if not is_success_status(http_status):
            error = remote_error_from_response(response, http_status=http_status or 0)
            logger.error("request failed url=%s http_status=%s", safe_url, http_status)
            raise error

        try:
            payload = parse_json_payload(response, http_status=http_status)
        except ApodDecodeError:
            logger.error("response parse error url=%s http_status=%s", safe_url, http_status)
            raise
        logger.info("request success url=%s", safe_url)
        return payload


__all__ = [
    "AsyncTransport",
]
