from __future__ import annotations

import sys
from typing import List

import typer

from trainsearch.config import get_settings
from trainsearch.domain.errors import TrainSearchError
from trainsearch.orchestrator import RESULT_LIMIT, find_trains
from trainsearch.reporter import print_results
from trainsearch.sorting import available_criteria
from trainsearch.utils.logging import configure_logging, get_logger

log = get_logger(__name__)

app = typer.Typer(help="Find the best trains between two stations.")


class _TokenPrompt:
    """
    Read whitespace-delimited tokens, prompting only when none are pending.

    An answer may carry several tokens (`1 2 price`); the extra ones feed the
    following prompts. An empty answer yields an empty token.
    """

    def __init__(self) -> None:
        self._pending: List[str] = []

    def ask(self, label: str) -> str:
        if not self._pending:
            answer = typer.prompt(label, default="", show_default=False)
            self._pending = answer.split()
            if not self._pending:
                return ""
        return self._pending.pop(0)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"data_file={settings.data_file} | env={settings.app_env} | "
        f"log_level={settings.log_level} json_logs={settings.json_logs} | "
        f"max_results={RESULT_LIMIT}"
    )


@app.command()
def criteria() -> None:
    """
    List the supported sort criteria.
    """
    typer.echo("Available criteria: " + ", ".join(available_criteria()))


@app.command()
def find() -> None:
    """
    Prompt for departure station, arrival station and criteria, then print the
    best matching trains.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)

    prompt = _TokenPrompt()
    departure_station = prompt.ask("Enter departure station")
    arrival_station = prompt.ask("Enter arrival station")
    sort_criteria = prompt.ask("Enter criteria")

    try:
        trains = find_trains(departure_station, arrival_station, sort_criteria, settings=settings)
    except TrainSearchError as exc:
        log.info("Query failed", extra={"kind": exc.kind.name})
        typer.echo(str(exc))
        raise typer.Exit(code=1)

    print_results(trains)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
