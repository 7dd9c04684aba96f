"""APOD record model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Apod:
    """One Astronomy Picture of the Day entry.

    Field names follow the service's JSON keys. ``hdurl`` is usually absent
    for videos, ``thumbnail_url`` is only sent for videos when thumbnails are
    requested and ``copyright`` is missing for public domain entries.
    """

    title: str
    date: str
    url: str
    media_type: str
    explanation: str
    hdurl: str | None = None
    thumbnail_url: str | None = None
    copyright: str | None = None


__all__ = [
    "Apod",
]
