"""
Domain package for train search.

Exports the record and query models and the error taxonomy. Keep this package
focused on data definitions and validation concerns.
"""

from trainsearch.domain.errors import (
    DataSourceError,
    DecodeError,
    EmptyArrivalStationError,
    EmptyDepartureStationError,
    ErrorKind,
    InvalidArrivalStationError,
    InvalidDepartureStationError,
    MalformedTimeError,
    QueryValidationError,
    TrainSearchError,
    UnsupportedCriteriaError,
)
from trainsearch.domain.models import Criteria, Query, TrainRecord

__all__ = [
    # Models
    "Criteria",
    "Query",
    "TrainRecord",
    # Errors
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
