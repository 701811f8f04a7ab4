#!/usr/bin/env python3
"""Rank a JSON schedule with one sport's RPI preset and print the top teams."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from domain.pipeline import rank_schedule
from domain.ratings.common import Team
from domain.ratings.registry import get, get_by_name
from domain.ratings.rpi.config import RPISystemConfig, load_rpi_system_configs
from domain.ratings.rpi.errors import InvalidInputError
from repositories.schedule_repository import load_schedule

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Rank teams from a schedule file by RPI.",
)


def resolve_system_config(
    *,
    sport: str | None,
    sport_id: int | None,
    config_dir: Path | None,
) -> RPISystemConfig:
    """Pick one preset by name or sport id from the registry or a config directory."""
    if sport is not None and sport_id is not None:
        raise typer.BadParameter("Use either --sport or --sport-id, not both")

    if config_dir is None:
        if sport is not None:
            try:
                return get_by_name(sport)
            except KeyError as exc:
                raise typer.BadParameter(str(exc), param_hint="--sport") from exc
        return get(sport_id)

    configs = load_rpi_system_configs(config_dir)
    for config in configs:
        if sport is not None and config.name == sport.lower():
            return config
        if sport is None and config.sport_id == (sport_id or 0):
            return config
    raise typer.BadParameter(
        f"No matching preset found in {config_dir}",
        param_hint="--sport" if sport is not None else "--sport-id",
    )


def load_schedule_or_fail(schedule: Path) -> list[Team]:
    """Load a schedule file, reporting unreadable files as a bad --schedule value."""
    try:
        return load_schedule(schedule)
    except (FileNotFoundError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--schedule") from exc


@app.command()
def show_team_rpi_top(
    schedule: Annotated[
        Path,
        typer.Option("--schedule", help="JSON schedule file (list of teams with games)."),
    ],
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
    top_n: Annotated[
        int,
        typer.Option("--top-n", help="Number of teams to print."),
    ] = 20,
    workers: Annotated[
        int,
        typer.Option("--workers", help="Worker threads for per-team aggregation."),
    ] = 1,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG, INFO, WARNING)."),
    ] = "WARNING",
) -> None:
    """Print the RPI table for one schedule, reliable teams first."""
    if top_n <= 0:
        raise typer.BadParameter("--top-n must be greater than 0")
    if workers <= 0:
        raise typer.BadParameter("--workers must be greater than 0")
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    system_config = resolve_system_config(sport=sport, sport_id=sport_id, config_dir=config_dir)
    teams = load_schedule_or_fail(schedule)
    try:
        summary = rank_schedule(
            teams=teams,
            system_config=system_config,
            max_workers=workers,
            echo=typer.echo,
        )
    except InvalidInputError as exc:
        raise typer.BadParameter(str(exc), param_hint="--schedule") from exc

    for result in summary.calculation.results[:top_n]:
        flag = "" if result.reliable else " *"
        typer.echo(
            f"{result.rank:3d}. {result.team_name:<24} "
            f"rpi={result.rpi:.4f} wp={result.wp:.3f} clwp={result.clwp:.3f} "
            f"oclwp={result.oclwp:.3f} ooclwp={result.ooclwp:.3f} "
            f"diff={result.diff:+.3f} dom={result.domination:.3f} "
            f"record={result.wins}-{result.losses}-{result.ties}{flag}"
        )

    if summary.reliable_teams < summary.teams:
        typer.echo(
            f"* fewer than min_games={system_config.coefficients.min_games} rated games"
        )
    for issue in summary.calculation.issues:
        typer.echo(
            f"skipped team_id={issue.team_id} game_index={issue.game_index} "
            f"kind={issue.kind.value}: {issue.message}"
        )


if __name__ == "__main__":
    app()
