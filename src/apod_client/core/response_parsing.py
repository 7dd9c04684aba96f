"""Shared response evaluation helpers for sync/async transports."""

from __future__ import annotations

from typing import Protocol

from .errors import ApodDecodeError, ApodRemoteError, extract_error_message


class HttpResponse(Protocol):
    status_code: int

    def json(self) -> object: ...


def is_success_status(http_status: int | None) -> bool:
    return http_status is not None and 200 <= http_status < 300


def remote_error_from_response(
    response: HttpResponse,
    *,
    http_status: int,
) -> ApodRemoteError:
    """Build the error for a non-2xx response, keeping the body for diagnostics."""

    body = getattr(response, "text", None)
    if body is not None and not isinstance(body, str):
        body = None
    try:
        detail = extract_error_message(response.json())
    except Exception:
        detail = None
    message = detail or f"APOD request failed with HTTP {http_status}"
    return ApodRemoteError(message, status_code=http_status, body=body or None)


def parse_json_payload(
    response: HttpResponse,
    *,
    http_status: int | None,
) -> object:
    """Parse response JSON payload and map parse failures to domain errors."""

    try:
        return response.json()
    except Exception as exc:
        raise ApodDecodeError(
            "response body is not valid JSON",
            http_status=http_status,
            cause="decode",
        ) from exc


__all__ = [
    "HttpResponse",
    "is_success_status",
    "remote_error_from_response",
    "parse_json_payload",
]
