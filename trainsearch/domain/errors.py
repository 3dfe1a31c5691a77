"""
Error taxonomy for train search.

Every failure the query pipeline can report is one of a closed set of kinds.
Callers match on `error.kind` (or on the exception class); errors carry no
payload beyond an optional human-readable detail.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, Optional


class ErrorKind(str, Enum):
    """Closed enumeration of error kinds. Values double as user-facing messages."""

    IO = "cannot read train data"
    DECODE = "malformed train data"
    MALFORMED_TIME = "malformed time of day"
    EMPTY_DEPARTURE_STATION = "empty departure station"
    EMPTY_ARRIVAL_STATION = "empty arrival station"
    INVALID_DEPARTURE_STATION = "bad departure station input"
    INVALID_ARRIVAL_STATION = "bad arrival station input"
    UNSUPPORTED_CRITERIA = "unsupported criteria"


class TrainSearchError(Exception):
    """
    Base class for all expected train search failures.

    Subclasses pin `kind`; two errors are equal when their kinds are equal.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail
        message = self.kind.value if not detail else f"{self.kind.value}: {detail}"
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrainSearchError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


class DataSourceError(TrainSearchError):
    kind = ErrorKind.IO


class DecodeError(TrainSearchError):
    kind = ErrorKind.DECODE


class MalformedTimeError(TrainSearchError, ValueError):
    # ValueError so pydantic validators report it as a field error.
    kind = ErrorKind.MALFORMED_TIME


class QueryValidationError(TrainSearchError):
    """Raised when user-supplied query parameters are rejected."""


class EmptyDepartureStationError(QueryValidationError):
    kind = ErrorKind.EMPTY_DEPARTURE_STATION


class EmptyArrivalStationError(QueryValidationError):
    kind = ErrorKind.EMPTY_ARRIVAL_STATION


class InvalidDepartureStationError(QueryValidationError):
    kind = ErrorKind.INVALID_DEPARTURE_STATION


class InvalidArrivalStationError(QueryValidationError):
    kind = ErrorKind.INVALID_ARRIVAL_STATION


class UnsupportedCriteriaError(QueryValidationError):
    kind = ErrorKind.UNSUPPORTED_CRITERIA


__all__ = [
    "ErrorKind",
    "TrainSearchError",
    "DataSourceError",
    "DecodeError",
    "MalformedTimeError",
    "QueryValidationError",
    "EmptyDepartureStationError",
    "EmptyArrivalStationError",
    "InvalidDepartureStationError",
    "InvalidArrivalStationError",
    "UnsupportedCriteriaError",
]
