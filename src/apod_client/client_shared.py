"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from .config import ApodClientConfig
from .core.errors import ApodInvalidCredentialError, ApodValidationError
from .core.key_validator import is_valid


def validate_client_config(config: ApodClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise ApodValidationError(str(exc)) from exc


def validate_api_key(candidate: object) -> str:
    if not is_valid(candidate):
        raise ApodInvalidCredentialError(candidate)
    return candidate  # type: ignore[return-value]


__all__ = [
    "validate_client_config",
    "validate_api_key",
]
