"""API key well-formedness check."""

from __future__ import annotations

import re

API_KEY_LENGTH = 40

_API_KEY_PATTERN = re.compile(rf"[A-Za-z0-9]{{{API_KEY_LENGTH}}}")


def is_valid(candidate: object) -> bool:
    """Return True when ``candidate`` looks like an api.nasa.gov key."""

    if not isinstance(candidate, str):
        return False
    return _API_KEY_PATTERN.fullmatch(candidate) is not None


__all__ = [
    "API_KEY_LENGTH",
    "is_valid",
]
