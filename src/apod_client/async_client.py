"""Public async client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .apod.async_service import AsyncApodService
from .apod.models import Apod
from .apod.queries import ByDate, DateFrom, DateRange, Latest, RandomSample
from .client_shared import validate_api_key, validate_client_config
from .config import ApodClientConfig
from .core.async_transport import AsyncTransport


class AsyncApodClient:
    """Public async APOD API client.

    The API key is checked once at construction and kept for the lifetime of
    the client. Date strings, ``count`` bounds and range ordering are passed
    to the service as given; the service reports bad values as
    ``ApodRemoteError``.
    """

    def __init__(
        self,
        api_key: str,
        *,
        config: ApodClientConfig | None = None,
        transport: AsyncTransport | None = None,
    ) -> None:
        self._api_key = validate_api_key(api_key)
        self._config = config or ApodClientConfig()
        validate_client_config(self._config)

        self._transport = transport or AsyncTransport(self._config)
        self._service = AsyncApodService(
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
        transport: AsyncTransport | None = None,
    ) -> "AsyncApodClient":
        """Validate ``api_key`` and return a ready client.

        Raises ``ApodInvalidCredentialError`` carrying the rejected key.
        """

        return cls(api_key, config=config, transport=transport)

    @property
    def api_key(self) -> str:
        return self._api_key

    async def get_latest(self) -> Apod:
        return await self._service.fetch_one(Latest())

    async def get_by_date(self, date: str) -> Apod:
        """Return the entry for ``date`` (``yyyy-mm-dd``)."""
        return await self._service.fetch_one(ByDate(date))

    async def get_random_sample(self, count: int) -> tuple[Apod, ...]:
        """Return ``count`` randomly chosen entries (the service accepts 1-100)."""
        return await self._service.fetch_many(RandomSample(count))

    async def get_range(self, start: str, end: str) -> tuple[Apod, ...]:
        """Return entries from ``start`` to ``end``, both inclusive."""
        return await self._service.fetch_many(DateRange(start, end))

    async def get_from(self, start: str) -> tuple[Apod, ...]:
        """Return entries from ``start`` up to the latest one."""
        return await self._service.fetch_many(DateFrom(start))

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> "AsyncApodClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False

    def __repr__(self) -> str:
        return f"AsyncApodClient(base_url={self._config.base_url!r})"


__all__ = [
    "AsyncApodClient",
]
