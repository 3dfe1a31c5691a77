from __future__ import annotations

from datetime import time

import pytest

from trainsearch.domain.errors import ErrorKind, MalformedTimeError
from trainsearch.domain.timeparse import format_time_of_day, parse_time_of_day


def test_parse_time_of_day_returns_naive_time():
    parsed = parse_time_of_day("09:15:00")
    assert parsed == time(9, 15, 0)
    assert parsed.tzinfo is None


def test_parse_then_format_reproduces_input():
    assert format_time_of_day(parse_time_of_day("09:15:00")) == "09:15:00"


@pytest.mark.parametrize("value", ["00:00:00", "23:59:59", "12:30:45"])
def test_parse_time_of_day_accepts_day_bounds(value: str):
    assert format_time_of_day(parse_time_of_day(value)) == value


def test_parsed_times_order_by_time_of_day():
    assert parse_time_of_day("06:00:00") < parse_time_of_day("06:00:01") < parse_time_of_day("18:00:00")


@pytest.mark.parametrize(
    "value",
    [
        "9:15:00",  # not zero-padded
        "09:15",  # too short
        "09:15:00:00",  # too long
        "09-15-00",  # wrong separators
        "24:00:00",  # hour out of range
        "12:60:00",  # minute out of range
        "12:00:60",  # second out of range
        "ab:cd:ef",
        " 09:15:00",
        "",
        None,
        915,
    ],
)
def test_parse_time_of_day_rejects_malformed_input(value):
    with pytest.raises(MalformedTimeError) as excinfo:
        parse_time_of_day(value)
    assert excinfo.value.kind is ErrorKind.MALFORMED_TIME
    assert str(excinfo.value).startswith("malformed time of day")


def test_malformed_time_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_time_of_day("noon")
