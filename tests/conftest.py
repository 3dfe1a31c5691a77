"""
Pytest configuration for train search.

Provides fixtures for:
- Building train payloads in the data file format
- Writing payloads to a temporary data file
- Settings pointing at that file
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

from trainsearch.config import Settings, get_settings
from trainsearch.domain.models import TrainRecord

TrainFactory = Callable[..., Dict[str, Any]]


def make_train_payload(
    train_id: int,
    departure_station: int = 1,
    arrival_station: int = 2,
    price: float = 10.0,
    departure_time: str = "08:00:00",
    arrival_time: str = "10:00:00",
) -> Dict[str, Any]:
    """One train object as it appears in the data file."""
    return {
        "TrainID": train_id,
        "DepartureStationID": departure_station,
        "ArrivalStationID": arrival_station,
        "Price": price,
        "ArrivalTime": arrival_time,
        "DepartureTime": departure_time,
    }


def make_train(train_id: int, **overrides: Any) -> TrainRecord:
    """A decoded train record."""
    return TrainRecord.model_validate(make_train_payload(train_id, **overrides))


@pytest.fixture
def train_payload() -> TrainFactory:
    return make_train_payload


@pytest.fixture
def price_scenario_payload() -> List[Dict[str, Any]]:
    """
    Five trains from 1 to 2 priced [30, 10, 50, 10, 20], plus noise on other
    routes interleaved between them.
    """
    return [
        make_train_payload(1, price=30),
        make_train_payload(100, departure_station=2, arrival_station=1, price=1),
        make_train_payload(2, price=10),
        make_train_payload(3, price=50),
        make_train_payload(101, departure_station=1, arrival_station=3, price=5),
        make_train_payload(4, price=10),
        make_train_payload(5, price=20),
    ]


@pytest.fixture
def write_data_file(tmp_path: Path) -> Callable[[Any], Path]:
    """Write a payload (JSON-serializable or raw text) to a temporary data file."""

    def _write(payload: Any) -> Path:
        path = tmp_path / "data.json"
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def data_file(write_data_file, price_scenario_payload) -> Path:
    return write_data_file(price_scenario_payload)


@pytest.fixture
def test_settings(data_file: Path) -> Settings:
    """
    Settings fixture pointing at the temporary data file.
    """
    return Settings(data_file=data_file, log_level="DEBUG")


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Environment overrides must not leak between tests through the cache."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
