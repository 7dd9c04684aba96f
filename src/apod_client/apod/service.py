"""Single-request APOD execution."""

from __future__ import annotations

from ..config import ApodClientConfig
from ..core.transport import SyncTransport
from .models import Apod
from .parser import parse_apod, parse_apod_list
from .queries import QueryMode
from .service_shared import build_request_url


class ApodService:
    """Runs one query mode against the transport and decodes the result."""

    def __init__(
        self,
        transport: SyncTransport,
        *,
        config: ApodClientConfig,
        credential: str,
    ) -> None:
        self._transport = transport
        self._config = config
        self._credential = credential

    def execute(self, mode: QueryMode) -> object:
        url = build_request_url(self._config, self._credential, mode)
        return self._transport.request(url)

    def fetch_one(self, mode: QueryMode) -> Apod:
        return parse_apod(self.execute(mode))

    def fetch_many(self, mode: QueryMode) -> tuple[Apod, ...]:
        return parse_apod_list(self.execute(mode))


__all__ = [
    "ApodService",
]
