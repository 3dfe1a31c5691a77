from __future__ import annotations

from typing import Iterable, List, Optional

from rich.console import Console
from rich.text import Text

from trainsearch.domain.models import TrainRecord
from trainsearch.domain.timeparse import format_time_of_day


def format_train(train: TrainRecord) -> str:
    """Render a train as a single line of `field=value` pairs."""
    return (
        f"id={train.id} "
        f"departure_station_id={train.departure_station_id} "
        f"arrival_station_id={train.arrival_station_id} "
        f"price={train.price!r} "
        f"departure_time={format_time_of_day(train.departure_time)} "
        f"arrival_time={format_time_of_day(train.arrival_time)}"
    )


def print_results(trains: Iterable[TrainRecord], console: Optional[Console] = None) -> None:
    """
    Print one line per train to stdout.

    Prints a short notice instead when there is nothing to show.
    """
    console = console or Console()
    lines: List[str] = [format_train(train) for train in trains]

    if not lines:
        console.print("[yellow]No trains found.[/yellow]")
        return

    for line in lines:
        console.print(Text(line), soft_wrap=True)


__all__ = ["format_train", "print_results"]
