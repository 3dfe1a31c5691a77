"""
Query orchestration: load, decode, validate, select, sort, truncate.

Usage (example from CLI):
    from trainsearch.orchestrator import find_trains

    trains = find_trains("1", "2", "price")
    for train in trains:
        print(train)

Every call re-reads the data source; nothing is cached between queries.
"""

from __future__ import annotations

from typing import List, Optional

from trainsearch.config import Settings
from trainsearch.decoder import decode_trains
from trainsearch.domain.models import TrainRecord
from trainsearch.infrastructure.data_source import DataSource, get_data_source
from trainsearch.selection import select_trains
from trainsearch.sorting import sort_trains
from trainsearch.utils.logging import get_logger
from trainsearch.validation import validate_query

log = get_logger(__name__)

RESULT_LIMIT = 3


def load_trains(source: DataSource) -> List[TrainRecord]:
    """Read and decode every train from `source`."""
    return decode_trains(source.read())


def find_trains(
    departure_station: str,
    arrival_station: str,
    criteria: str,
    source: Optional[DataSource] = None,
    settings: Optional[Settings] = None,
) -> List[TrainRecord]:
    """
    Find the best trains between two stations.

    Parameters
    ----------
    departure_station, arrival_station : str
        Raw station ids as typed by the user.
    criteria : str
        Raw sort criterion (`price`, `arrival-time` or `departure-time`).
    source : DataSource | None
        Where to read trains from. Defaults to the configured data file.
    settings : Settings | None
        Used to build the default source when `source` is None.

    Returns
    -------
    List[TrainRecord]
        At most `RESULT_LIMIT` trains, best first. Empty if nothing matches.

    Raises
    ------
    TrainSearchError
        The first failure from loading, decoding or validation, unchanged.
    """
    source = source if source is not None else get_data_source(settings)
    trains = load_trains(source)
    log.info("Loaded trains", extra={"trains": len(trains), "source": repr(source)})

    query = validate_query(departure_station, arrival_station, criteria)

    selected = select_trains(trains, query)
    sort_trains(selected, query.criteria)
    log.info(
        "Query complete",
        extra={
            "departure_station": query.departure_station,
            "arrival_station": query.arrival_station,
            "criteria": query.criteria.value,
            "matches": len(selected),
        },
    )
    return selected[:RESULT_LIMIT]


__all__ = ["RESULT_LIMIT", "find_trains", "load_trains"]
