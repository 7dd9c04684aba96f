"""Parsers from APOD JSON payload into typed records."""

from __future__ import annotations

from collections.abc import Mapping

from ..core.errors import ApodDecodeError
from .models import Apod

_REQUIRED_FIELDS: tuple[str, ...] = ("title", "date", "url", "media_type", "explanation")
_OPTIONAL_FIELDS: tuple[str, ...] = ("hdurl", "thumbnail_url", "copyright")


def _required_text(item: Mapping[str, object], name: str) -> str:
    if name not in item or item[name] is None:
        raise ApodDecodeError(f"APOD field '{name}' is missing", cause="decode")
    value = item[name]
    if not isinstance(value, str):
        raise ApodDecodeError(f"APOD field '{name}' must be a string", cause="decode")
    return value


def _optional_text(item: Mapping[str, object], name: str) -> str | None:
    value = item.get(name)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ApodDecodeError(f"APOD field '{name}' must be a string", cause="decode")
    return value


def parse_apod(payload: object) -> Apod:
    if not isinstance(payload, Mapping):
        raise ApodDecodeError("APOD response must be a JSON object", cause="decode")
    required = {name: _required_text(payload, name) for name in _REQUIRED_FIELDS}
    optional = {name: _optional_text(payload, name) for name in _OPTIONAL_FIELDS}
    return Apod(**required, **optional)


def parse_apod_list(payload: object) -> tuple[Apod, ...]:
    if not isinstance(payload, list):
        raise ApodDecodeError("APOD response must be a JSON array", cause="decode")
    return tuple(parse_apod(item) for item in payload)


__all__ = [
    "parse_apod",
    "parse_apod_list",
]
