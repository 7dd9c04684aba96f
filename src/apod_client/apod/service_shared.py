"""Shared request preparation for sync/async services."""

from __future__ import annotations

from ..config import ApodClientConfig
from ..core.url_builder import build_url
from .queries import QueryMode


def build_request_url(
    config: ApodClientConfig,
    credential: str,
    mode: QueryMode,
) -> str:
    return build_url(
        config.base_url,
        credential,
        mode,
        thumbs=config.include_thumbnails,
    )


__all__ = [
    "build_request_url",
]
