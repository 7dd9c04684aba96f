"""Public client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .apod.models import Apod
from .apod.queries import ByDate, DateFrom, DateRange, Latest, RandomSample
from .apod.service import ApodService
from .client_shared import validate_api_key, validate_client_config
from .config import ApodClientConfig
from .core.transport import SyncTransport


class ApodClient:
    """Public blocking APOD API client."""

    def __init__(
        self,
        api_key: str,
        *,
        config: ApodClientConfig | None = None,
        transport: SyncTransport | None = None,
    ) -> None:
        self._api_key = validate_api_key(api_key)
        self._config = config or ApodClientConfig()
        validate_client_config(self._config)

        self._transport = transport or SyncTransport(self._config)
        self._service = ApodService(
            self._transport,
            config=self._config,
            credential=self._api_key,
        )

    @classmethod
    def build(
        cls,
        api_key: str,
        *,
        config: ApodClientConfig | None = None,
        transport: SyncTransport | None = None,
    ) -> "ApodClient":
        return cls(api_key, config=config, transport=transport)

    @property
    def api_key(self) -> str:
        return self._api_key

    def get_latest(self) -> Apod:
        return self._service.fetch_one(Latest())

    def get_by_date(self, date: str) -> Apod:
        return self._service.fetch_one(ByDate(date))

    def get_random_sample(self, count: int) -> tuple[Apod, ...]:
        return self._service.fetch_many(RandomSample(count))

    def get_range(self, start: str, end: str) -> tuple[Apod, ...]:
        return self._service.fetch_many(DateRange(start, end))

    def get_from(self, start: str) -> tuple[Apod, ...]:
        return self._service.fetch_many(DateFrom(start))

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "ApodClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False

    def __repr__(self) -> str:
        return f"ApodClient(base_url={self._config.base_url!r})"


__all__ = [
    "ApodClient",
]
