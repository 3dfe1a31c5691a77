from __future__ import annotations

from conftest import make_train
from rich.console import Console

from trainsearch.reporter import format_train, print_results


def test_format_train_renders_field_pairs():
    train = make_train(
        7,
        departure_station=1,
        arrival_station=2,
        price=10,
        departure_time="09:15:00",
        arrival_time="11:00:00",
    )
    assert format_train(train) == (
        "id=7 departure_station_id=1 arrival_station_id=2 price=10.0 "
        "departure_time=09:15:00 arrival_time=11:00:00"
    )


def test_format_train_prints_price_as_stored():
    assert "price=10.255 " in format_train(make_train(1, price=10.255))
    assert "price=1234567.5 " in format_train(make_train(2, price=1234567.5))


def test_print_results_writes_one_line_per_train():
    console = Console(record=True, width=40)
    print_results([make_train(1), make_train(2)], console=console)

    lines = console.export_text().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("id=1 ")
    assert lines[1].startswith("id=2 ")


def test_print_results_reports_empty_result():
    console = Console(record=True)
    print_results([], console=console)
    assert console.export_text().strip() == "No trains found."
