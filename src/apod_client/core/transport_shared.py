"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from ..config import ApodClientConfig


def build_default_headers(config: ApodClientConfig) -> Mapping[str, str]:
    return {
        "Accept": "application/json",
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: ApodClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


__all__ = [
    "build_default_headers",
    "build_default_timeout",
]
