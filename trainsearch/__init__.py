"""
Train search - find the best trains between two stations.

Reads a static JSON file of train records, keeps the trains between the
requested departure and arrival stations, sorts them by price, arrival time or
departure time, and returns the top three.

The query pipeline is:

- Decode the train data (with time-of-day parsing)
- Validate the user's query
- Select trains by station pair
- Sort by the requested criterion (stable)
- Truncate to the top results
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from trainsearch.config import Settings, get_settings
from trainsearch.decoder import decode_trains
from trainsearch.domain import (
    Criteria,
    DataSourceError,
    DecodeError,
    EmptyArrivalStationError,
    EmptyDepartureStationError,
    ErrorKind,
    InvalidArrivalStationError,
    InvalidDepartureStationError,
    MalformedTimeError,
    Query,
    QueryValidationError,
    TrainRecord,
    TrainSearchError,
    UnsupportedCriteriaError,
)
from trainsearch.domain.timeparse import format_time_of_day, parse_time_of_day
from trainsearch.infrastructure import BytesDataSource, DataSource, FileDataSource
from trainsearch.orchestrator import RESULT_LIMIT, find_trains
from trainsearch.selection import select_trains
from trainsearch.sorting import available_criteria, sort_trains
from trainsearch.utils.logging import configure_logging, get_logger
from trainsearch.validation import validate_query

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Query pipeline
    "RESULT_LIMIT",
    "find_trains",
    "decode_trains",
    "validate_query",
    "select_trains",
    "sort_trains",
    "available_criteria",
    "parse_time_of_day",
    "format_time_of_day",
    # Data sources
    "DataSource",
    "FileDataSource",
    "BytesDataSource",
    # Domain
    "Criteria",
    "Query",
    "TrainRecord",
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
    # Logging
    "configure_logging",
    "get_logger",
]
