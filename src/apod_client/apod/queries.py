"""Query mode models.

Exactly one mode is sent per request. Each mode renders its own ordered
query parameters; the credential is added by the URL builder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(slots=True, frozen=True)
class Latest:
    def to_params(self) -> tuple[tuple[str, str], ...]:
        return ()


@dataclass(slots=True, frozen=True)
class ByDate:
    date: str

    def to_params(self) -> tuple[tuple[str, str], ...]:
        return (("date", self.date),)


@dataclass(slots=True, frozen=True)
class RandomSample:
    count: int

    def to_params(self) -> tuple[tuple[str, str], ...]:
        return (("count", str(self.count)),)


@dataclass(slots=True, frozen=True)
class DateRange:
    start: str
    end: str

    def to_params(self) -> tuple[tuple[str, str], ...]:
        return (("start_date", self.start), ("end_date", self.end))


@dataclass(slots=True, frozen=True)
class DateFrom:
    """Open-ended range from ``start`` up to the service's latest date."""

    start: str

    def to_params(self) -> tuple[tuple[str, str], ...]:
        return (("start_date", self.start),)


QueryMode = Union[Latest, ByDate, RandomSample, DateRange, DateFrom]


__all__ = [
    "Latest",
    "ByDate",
    "RandomSample",
    "DateRange",
    "DateFrom",
    "QueryMode",
]
