import json
from pathlib import Path

import pytest

from scripts import generate_data
from trainsearch import config
from trainsearch.decoder import decode_trains
from trainsearch.sorting import available_criteria


def test_get_settings_defaults(monkeypatch):
    for name in ("TRAINS_DATA_FILE", "APP_ENV", "LOG_LEVEL", "JSON_LOGS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(Path(__file__).parent)  # no .env here
    settings = config.get_settings()
    assert settings.data_file == Path("data.json")
    assert settings.app_env == "development"
    assert settings.log_level == "WARNING"
    assert settings.json_logs is False


def test_get_settings_reads_environment(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("TRAINS_DATA_FILE", str(tmp_path / "trains.json"))
    monkeypatch.setenv("JSON_LOGS", "true")
    settings = config.get_settings()
    assert settings.data_file == tmp_path / "trains.json"
    assert settings.json_logs is True


def test_get_settings_is_cached():
    assert config.get_settings() is config.get_settings()


def test_available_criteria_contains_known_entries():
    names = available_criteria()
    assert names == ["price", "arrival-time", "departure-time"]


def test_generate_data_writes_decodable_json(tmp_path: Path):
    path = tmp_path / "out" / "data.json"
    trains = generate_data._generate_trains(count=25, stations=4, seed=123)
    generate_data._write_trains(path, trains)

    assert path.exists()
    raw = json.loads(path.read_text(encoding="utf-8"))
    assert len(raw) == 25
    assert set(raw[0]) == {
        "TrainID",
        "DepartureStationID",
        "ArrivalStationID",
        "Price",
        "ArrivalTime",
        "DepartureTime",
    }
    assert decode_trains(path.read_bytes()) == trains


def test_generate_data_is_deterministic_and_well_formed():
    first = generate_data._generate_trains(count=50, stations=3, seed=7)
    second = generate_data._generate_trains(count=50, stations=3, seed=7)
    assert first == second
    assert [train.id for train in first] == list(range(1, 51))
    for train in first:
        assert train.departure_station_id != train.arrival_station_id
        assert 1 <= train.departure_station_id <= 3
        assert 1 <= train.arrival_station_id <= 3
        assert train.departure_time < train.arrival_time


def test_generate_data_rejects_single_station():
    with pytest.raises(ValueError, match="two stations"):
        generate_data._generate_trains(count=1, stations=1, seed=1)
