"""APOD domain package."""

from .models import Apod
from .queries import ByDate, DateFrom, DateRange, Latest, QueryMode, RandomSample

__all__ = [
    "Apod",
    "Latest",
    "ByDate",
    "RandomSample",
    "DateRange",
    "DateFrom",
    "QueryMode",
]
