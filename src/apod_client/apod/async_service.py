"""Async single-request APOD execution."""

from __future__ import annotations

from ..config import ApodClientConfig
from ..core.async_transport import AsyncTransport
from .models import Apod
from .parser import parse_apod, parse_apod_list
from .queries import QueryMode
from .service_shared import build_request_url


class AsyncApodService:
    """Async twin of ``ApodService``."""

    def __init__(
        self,
        transport: AsyncTransport,
        *,
        config: ApodClientConfig,
        credential: str,
    ) -> None:
        self._transport = transport
        self._config = config
        self._credential = credential

    async def execute(self, mode: QueryMode) -> object:
        url = build_request_url(self._config, self._credential, mode)
        return await self._transport.request(url)

    async def fetch_one(self, mode: QueryMode) -> Apod:
        return parse_apod(await self.execute(mode))

    async def fetch_many(self, mode: QueryMode) -> tuple[Apod, ...]:
        return parse_apod_list(await self.execute(mode))


__all__ = [
    "AsyncApodService",
]
