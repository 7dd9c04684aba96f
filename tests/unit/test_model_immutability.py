from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from apod_client.apod.models import Apod


def test_apod_is_immutable():
    apod = Apod(
        title="t",
        date="2023-04-01",
        url="https://example.test/a.jpg",
        media_type="image",
        explanation="e",
    )
    with pytest.raises(FrozenInstanceError):
        apod.title = "other"  # type: ignore[misc]


def test_apod_equality_is_by_value():
    kwargs = dict(
        title="t",
        date="2023-04-01",
        url="https://example.test/a.jpg",
        media_type="image",
        explanation="e",
    )
    assert Apod(**kwargs) == Apod(**kwargs)
