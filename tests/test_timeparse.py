"""Tests for timeparse.parse_time and timeparse.time_key."""

from __future__ import annotations

import pytest

from dayplanner.errors import CorruptEntry, InvalidTime
from dayplanner.timeparse import parse_time, time_key

# ---- valid input ----


def test_hmm():
    assert parse_time("9:30") == "9:30"


def test_hhmm():
    assert parse_time("14:30") == "14:30"


def test_single_digit_minutes_padded():
    assert parse_time("9:5") == "9:05"


def test_leading_zero_hour_dropped():
    assert parse_time("09:00") == "9:00"


def test_midnight():
    assert parse_time("0:00") == "0:00"


def test_last_minute_of_day():
    assert parse_time("23:59") == "23:59"


def test_surrounding_noise_stripped():
    assert parse_time("  at 7:45 sharp\n") == "7:45"


def test_trailing_newline():
    assert parse_time("10:00\n") == "10:00"


@pytest.mark.parametrize("hour", [0, 5, 10, 23])
@pytest.mark.parametrize("minute", [0, 7, 30, 59])
def test_canonical_form(hour, minute):
    assert parse_time(f"{hour:02d}:{minute}") == f"{hour}:{minute:02d}"


# ---- invalid input ----


@pytest.mark.parametrize(
    "raw",
    [
        "25:00",
        "24:00",
        "10:60",
        "930",
        "9.30",
        "abc",
        "9:",
        ":30",
        "1:2:3",
        "",
    ],
)
def test_invalid_raises(raw):
    with pytest.raises(InvalidTime):
        parse_time(raw)


def test_invalid_time_is_value_error():
    with pytest.raises(ValueError):
        parse_time("99:99")


def test_invalid_time_message():
    with pytest.raises(InvalidTime) as exc:
        parse_time("25:00")
    assert str(exc.value) == "Invalid time."
    assert exc.value.value == "25:00"


# ---- time_key ----


def test_time_key_concatenates_digits():
    assert time_key("9:30") == 930
    assert time_key("14:05") == 1405


def test_time_key_orders_padded_minutes():
    assert time_key("9:59") < time_key("10:00")


def test_time_key_garbage_raises():
    with pytest.raises(CorruptEntry):
        time_key("noon")
