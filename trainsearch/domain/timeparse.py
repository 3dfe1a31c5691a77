"""
Time-of-day parsing for train records.

Train data carries clock times as fixed-layout `HH:MM:SS` strings with no date.
They are parsed into naive `datetime.time` values so that comparisons are
ordered by time of day.
"""

from __future__ import annotations

import re
from datetime import datetime, time
from typing import Any

from trainsearch.domain.errors import MalformedTimeError

TIME_LAYOUT = "%H:%M:%S"

_TIME_PATTERN = re.compile(r"\d{2}:\d{2}:\d{2}", re.ASCII)


def parse_time_of_day(value: Any) -> time:
    """
    Parse a zero-padded 24-hour `HH:MM:SS` string.

    Raises
    ------
    MalformedTimeError
        If `value` is not a string in exactly that layout or a component is out
        of range.
    """
    if not isinstance(value, str) or not _TIME_PATTERN.fullmatch(value):
        raise MalformedTimeError(f"expected HH:MM:SS, got {value!r}")
    try:
        return datetime.strptime(value, TIME_LAYOUT).time()
    except ValueError as exc:
        raise MalformedTimeError(f"{value!r} is out of range") from exc


def format_time_of_day(value: time) -> str:
    return value.strftime(TIME_LAYOUT)


__all__ = ["TIME_LAYOUT", "parse_time_of_day", "format_time_of_day"]
