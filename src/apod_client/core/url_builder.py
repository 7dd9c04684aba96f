"""Request URL assembly."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from ..apod.queries import QueryMode

_REDACTED = "REDACTED"


def build_url(
    base_endpoint: str,
    credential: str,
    mode: QueryMode,
    *,
    thumbs: bool = False,
) -> str:
    """Build the full GET URL for ``mode``.

    ``api_key`` is always the first added parameter, followed by the mode's
    own parameters in their declared order and ``thumbs`` when requested.
    Values are not validated, only percent-encoded.
    """

    params: list[tuple[str, str]] = [("api_key", credential)]
    params.extend(mode.to_params())
    if thumbs:
        params.append(("thumbs", "True"))
    return str(httpx.URL(base_endpoint).copy_merge_params(params))


def redact_url(url: str) -> str:
    """Hide the credential before a URL is logged."""

    parsed = httpx.URL(url)
    if "api_key" not in parsed.params:
        return url
    return str(parsed.copy_set_param("api_key", _REDACTED))


__all__ = [
    "build_url",
    "redact_url",
]
