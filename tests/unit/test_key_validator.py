from __future__ import annotations

import pytest

from apod_client.core.key_validator import API_KEY_LENGTH, is_valid

VALID = "hrDwl56I9DKfPstNy9cqaTn0S68dTYpo4kB96dku"


def test_valid_api_key():
    assert is_valid(VALID) is True


def test_all_upper_lower_and_digit_keys_are_valid():
    assert is_valid("A" * API_KEY_LENGTH) is True
    assert is_valid("z" * API_KEY_LENGTH) is True
    assert is_valid("0123456789" * 4) is True


@pytest.mark.parametrize(
    "candidate",
    [
        "",
        "hrDwl56I9DKfPstNy9cq",
        VALID[:-1],
        VALID + "a",
        "hrDwl56I9DKfPstNy9cqaTn0S68dTYpo4kB96dkuHfo389sJWE",
    ],
    ids=["empty", "too-short", "length-39", "length-41", "too-long"],
)
def test_wrong_length_is_invalid(candidate: str):
    assert is_valid(candidate) is False


@pytest.mark.parametrize("bad_char", ["%", "-", "_", " ", "é", "٣", "\n"])
@pytest.mark.parametrize("position", [0, 17, API_KEY_LENGTH - 1])
def test_single_non_alphanumeric_character_is_invalid(bad_char: str, position: int):
    candidate = VALID[:position] + bad_char + VALID[position + 1 :]
    assert len(candidate) == API_KEY_LENGTH
    assert is_valid(candidate) is False


def test_trailing_newline_is_invalid():
    assert is_valid(VALID + "\n") is False


def test_non_string_is_invalid():
    assert is_valid(None) is False
    assert is_valid(12345) is False
    assert is_valid(VALID.encode()) is False
