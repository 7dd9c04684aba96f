"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx

DEFAULT_BASE_URL = "https://api.nasa.gov/planetary/apod"


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class ApodClientConfig:
    """Runtime configuration for APOD client."""

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = "apod-client/0.1.0"
    include_thumbnails: bool = False

    transport: TransportConfig = field(default_factory=TransportConfig)

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        try:
            url = httpx.URL(self.base_url)
        except httpx.InvalidURL as exc:
            raise ValueError(f"base_url is not a valid URL: {exc}") from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError("base_url must be an absolute http(s) URL")
        if not isinstance(self.include_thumbnails, bool):
            raise ValueError("include_thumbnails must be bool")
        self.transport.validate()


__all__ = [
    "DEFAULT_BASE_URL",
    "TransportConfig",
    "ApodClientConfig",
]
