"""Error types and remote error extraction."""

from __future__ import annotations

from collections.abc import Mapping


def extract_error_message(payload: object) -> str | None:
    """Pull a human readable message out of an APOD/api.nasa.gov error body.

    The gateway answers with ``{"error": {"code": ..., "message": ...}}`` while
    the APOD service itself uses ``{"code": 400, "msg": ...}``.
    """

    if not isinstance(payload, Mapping):
        return None
    error = payload.get("error")
    if isinstance(error, Mapping):
        value = error.get("message")
        if value is not None:
            return str(value)
    for key in ("msg", "message"):
        value = payload.get(key)
        if value is not None:
            return str(value)
    return None


class ApodApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class ApodInvalidCredentialError(ApodApiError):
    """API key is not a 40 character alphanumeric token."""

    def __init__(self, candidate: object) -> None:
        super().__init__("API key must be exactly 40 alphanumeric characters")
        self.candidate = candidate


class ApodValidationError(ApodApiError):
    """Invalid client configuration."""


class ApodRequestFailure(ApodApiError):
    """A request was issued but did not produce a usable result."""


class ApodTransportError(ApodRequestFailure):
    """Network/transport-level failure."""


class ApodRemoteError(ApodRequestFailure):
    """Service answered with a non-success HTTP status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        body: str | None = None,
    ) -> None:
        super().__init__(message, http_status=status_code, cause="remote")
        self.status_code = status_code
        self.body = body


class ApodDecodeError(ApodRequestFailure):
    """Response body does not match the expected shape."""


__all__ = [
    "ApodApiError",
    "ApodInvalidCredentialError",
    "ApodValidationError",
    "ApodRequestFailure",
    "ApodTransportError",
    "ApodRemoteError",
    "ApodDecodeError",
    "extract_error_message",
]
