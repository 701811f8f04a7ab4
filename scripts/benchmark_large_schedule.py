#!/usr/bin/env python3
"""Time an RPI run over a large roster, sequentially and with worker threads."""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from domain.ratings.rpi.calculator import calculate_all_teams_rpi
from domain.ratings.rpi.errors import InvalidInputError
from repositories.generated_schedule import dataset_stats, generate_schedule
from show_team_rpi_top import load_schedule_or_fail, resolve_system_config

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    help="Benchmark RPI calculation on a loaded or generated roster.",
)


@app.command()
def benchmark(
    schedule: Annotated[
        Path | None,
        typer.Option("--schedule", help="JSON schedule file. Omit to generate a roster."),
    ] = None,
    teams: Annotated[
        int,
        typer.Option("--teams", help="Teams in the generated roster."),
    ] = 200,
    games_per_team: Annotated[
        int,
        typer.Option("--games-per-team", help="Games per team in the generated roster."),
    ] = 100,
    seed: Annotated[
        int,
        typer.Option("--seed", help="Seed for the generated roster."),
    ] = 0,
    sport: Annotated[
        str | None,
        typer.Option("--sport", help="Preset name, for example basketball."),
    ] = None,
    sport_id: Annotated[
        int | None,
        typer.Option("--sport-id", help="Preset sport id. Unknown ids use the default preset."),
    ] = None,
    config_dir: Annotated[
        Path | None,
        typer.Option("--config-dir", help="Optional override for the preset directory."),
    ] = None,
    workers: Annotated[
        int,
        typer.Option("--workers", help="Worker threads for the parallel run."),
    ] = 4,
    top_n: Annotated[
        int,
        typer.Option("--top-n", help="Number of teams to print."),
    ] = 10,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG, INFO, WARNING)."),
    ] = "WARNING",
) -> None:
    """Print dataset size, both timings and the top of the table."""
    if workers <= 1:
        raise typer.BadParameter("--workers must be greater than 1")
    if top_n < 0:
        raise typer.BadParameter("--top-n must be >= 0")
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    system_config = resolve_system_config(sport=sport, sport_id=sport_id, config_dir=config_dir)
    if schedule is not None:
        roster = load_schedule_or_fail(schedule)
    else:
        try:
            roster = generate_schedule(team_count=teams, games_per_team=games_per_team, seed=seed)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--games-per-team") from exc

    stats = dataset_stats(roster)
    typer.echo(
        f"dataset teams={stats.team_count} games={stats.total_games} "
        f"pairs={stats.unique_opponent_pairs} avg_games={stats.average_games_per_team:.2f} "
        f"lookups~{stats.estimated_lookups}"
    )

    try:
        start = time.perf_counter()
        sequential = calculate_all_teams_rpi(roster, system_config.coefficients)
        sequential_seconds = time.perf_counter() - start

        start = time.perf_counter()
        threaded = calculate_all_teams_rpi(
            roster, system_config.coefficients, max_workers=workers
        )
        threaded_seconds = time.perf_counter() - start
    except InvalidInputError as exc:
        raise typer.BadParameter(str(exc), param_hint="--schedule") from exc

    typer.echo(f"system={system_config.name} sequential={sequential_seconds:.3f}s")
    typer.echo(f"system={system_config.name} workers={workers} threaded={threaded_seconds:.3f}s")
    typer.echo(f"results_match={sequential.results == threaded.results}")

    for result in sequential.results[:top_n]:
        typer.echo(
            f"{result.rank:3d}. {result.team_name:<24} rpi={result.rpi:.4f} "
            f"record={result.wins}-{result.losses}-{result.ties}"
        )


if __name__ == "__main__":
    app()
