"""
Validation of raw query parameters.

Checks run in a fixed order and stop at the first failure:
empty departure, empty arrival, departure format, arrival format, criteria.
"""

from __future__ import annotations

import re
from typing import Optional

from trainsearch.domain.errors import (
    EmptyArrivalStationError,
    EmptyDepartureStationError,
    InvalidArrivalStationError,
    InvalidDepartureStationError,
    UnsupportedCriteriaError,
)
from trainsearch.domain.models import Criteria, Query

FIRST_STATION_ID = 1
# Station ids are 64-bit on the data producer side.
_MAX_STATION_ID = 2**63 - 1

_INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


def _parse_station_id(raw: str) -> Optional[int]:
    """Parse a base-10 station id, returning None unless it is an integer >= 1."""
    if not _INTEGER_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if value < FIRST_STATION_ID or value > _MAX_STATION_ID:
        return None
    return value


def validate_query(departure_station: str, arrival_station: str, criteria: str) -> Query:
    """
    Turn three raw strings into a validated `Query`.

    Raises
    ------
    EmptyDepartureStationError, EmptyArrivalStationError,
    InvalidDepartureStationError, InvalidArrivalStationError,
    UnsupportedCriteriaError
        The first failing check, in that order.
    """
    if departure_station == "":
        raise EmptyDepartureStationError()
    if arrival_station == "":
        raise EmptyArrivalStationError()

    departure_id = _parse_station_id(departure_station)
    if departure_id is None:
        raise InvalidDepartureStationError(repr(departure_station))
    arrival_id = _parse_station_id(arrival_station)
    if arrival_id is None:
        raise InvalidArrivalStationError(repr(arrival_station))

    try:
        parsed_criteria = Criteria(criteria)
    except ValueError:
        raise UnsupportedCriteriaError(repr(criteria)) from None

    return Query(
        departure_station=departure_id,
        arrival_station=arrival_id,
        criteria=parsed_criteria,
    )


__all__ = ["FIRST_STATION_ID", "validate_query"]
