"""
Synthetic train data generator for train search.

Implements deterministic pseudo-random train generation and writes the result
as a JSON array in the data file format read by `trainsearch`.
"""

from __future__ import annotations

import json
import random
import sys
import time
from datetime import time as time_of_day
from pathlib import Path

import typer

from trainsearch.domain.models import TrainRecord

app = typer.Typer(help="Generate a synthetic train data file.")

SECONDS_PER_DAY = 24 * 60 * 60
# Journeys last between 20 minutes and 6 hours.
MIN_JOURNEY_SECONDS = 20 * 60
MAX_JOURNEY_SECONDS = 6 * 60 * 60


def _clock(seconds: int) -> time_of_day:
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return time_of_day(hours, minutes, secs)


def _generate_trains(count: int, stations: int, seed: int) -> list[TrainRecord]:
    if stations < 2:
        raise ValueError("at least two stations are required")

    rng = random.Random(seed)
    trains: list[TrainRecord] = []
    for train_id in range(1, count + 1):
        departure_station, arrival_station = rng.sample(range(1, stations + 1), 2)
        # Departure on the minute; arrival stays on the same day.
        departure = rng.randrange(0, SECONDS_PER_DAY - MIN_JOURNEY_SECONDS, 60)
        latest_arrival = min(departure + MAX_JOURNEY_SECONDS, SECONDS_PER_DAY - 60)
        arrival = rng.randrange(departure + MIN_JOURNEY_SECONDS, latest_arrival + 1, 60)
        trains.append(
            TrainRecord(
                id=train_id,
                departure_station_id=departure_station,
                arrival_station_id=arrival_station,
                price=round(rng.uniform(5, 150), 2),
                departure_time=_clock(departure),
                arrival_time=_clock(arrival),
            )
        )
    return trains


def _write_trains(path: Path, trains: list[TrainRecord]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [train.model_dump(by_alias=True) for train in trains]
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
        f.write("\n")


@app.command()
def main(
    trains: int = typer.Option(
        100,
        "--trains",
        "-t",
        help="Number of trains to generate.",
    ),
    stations: int = typer.Option(
        10,
        "--stations",
        "-s",
        help="Number of stations in the network (ids 1..N).",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("data.json"),
        "--output",
        "-o",
        help="Output JSON path.",
    ),
) -> None:
    """
    Generate synthetic trains and write them to a JSON data file.
    """
    start = time.perf_counter()
    typer.echo(f"Generating {trains:,} trains over {stations} stations -> {output} (seed={seed})")
    try:
        records = _generate_trains(trains, stations, seed)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)
    _write_trains(output, records)
    duration = time.perf_counter() - start
    typer.echo(f"Wrote {len(records):,} trains in {duration:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
