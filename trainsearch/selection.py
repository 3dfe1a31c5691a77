"""Station-pair filtering of decoded trains."""

from __future__ import annotations

from typing import Iterable, List

from trainsearch.domain.models import Query, TrainRecord


def select_trains(trains: Iterable[TrainRecord], query: Query) -> List[TrainRecord]:
    """
    Keep the trains running from the query's departure station to its arrival
    station, in their original order. Returns an empty list when none match.
    """
    return [
        train
        for train in trains
        if train.departure_station_id == query.departure_station
        and train.arrival_station_id == query.arrival_station
    ]


__all__ = ["select_trains"]
