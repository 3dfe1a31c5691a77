"""
Ordering of selected trains by a sort criterion.

Sorting is done in place with `list.sort`, which is stable: trains that compare
equal under the criterion keep their relative order.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Union

from trainsearch.domain.models import Criteria, TrainRecord


def _sort_keys() -> Dict[Criteria, Callable[[TrainRecord], Any]]:
    """Registry of sort keys per criterion."""
    return {
        Criteria.PRICE: lambda train: train.price,
        Criteria.ARRIVAL_TIME: lambda train: train.arrival_time,
        Criteria.DEPARTURE_TIME: lambda train: train.departure_time,
    }


def available_criteria() -> List[str]:
    """List supported criterion names."""
    return [criteria.value for criteria in _sort_keys()]


def sort_trains(trains: List[TrainRecord], criteria: Union[Criteria, str]) -> None:
    """
    Sort `trains` in place, ascending by `criteria`.
    """
    trains.sort(key=_sort_keys()[Criteria(criteria)])


__all__ = ["available_criteria", "sort_trains"]
