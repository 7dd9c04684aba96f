"""Public package exports for APOD API client."""

from .apod.models import Apod
from .async_client import AsyncApodClient
from .client import ApodClient
from .config import ApodClientConfig, TransportConfig
from .core.errors import (
    ApodApiError,
    ApodDecodeError,
    ApodInvalidCredentialError,
    ApodRemoteError,
    ApodRequestFailure,
    ApodTransportError,
    ApodValidationError,
)

__all__ = [
    "ApodClient",
    "AsyncApodClient",
    "ApodClientConfig",
    "TransportConfig",
    "Apod",
    "ApodApiError",
    "ApodInvalidCredentialError",
    "ApodValidationError",
    "ApodRequestFailure",
    "ApodTransportError",
    "ApodRemoteError",
    "ApodDecodeError",
]
