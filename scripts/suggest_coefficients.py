#!/usr/bin/env python3
"""Suggest RPI coefficients tuned to one team's rating profile."""

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

from domain.ratings.rpi.calculator import calculate_all_teams_rpi
from domain.ratings.rpi.errors import InvalidInputError
from domain.ratings.rpi.suggestions import suggest_coefficients
from show_team_rpi_top import load_schedule_or_fail, resolve_system_config

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Suggest coefficients for one team.",
)


@app.command()
def suggest(
    schedule: Annotated[
        Path,
        typer.Option("--schedule", help="JSON schedule file (list of teams with games)."),
    ],
    team_id: Annotated[
        int,
        typer.Option("--team-id", help="Team to tune the coefficients for."),
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
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG, INFO, WARNING)."),
    ] = "WARNING",
) -> None:
    """Print the preset and the suggested coefficients side by side."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    system_config = resolve_system_config(sport=sport, sport_id=sport_id, config_dir=config_dir)
    try:
        calculation = calculate_all_teams_rpi(
            load_schedule_or_fail(schedule), system_config.coefficients
        )
    except InvalidInputError as exc:
        raise typer.BadParameter(str(exc), param_hint="--schedule") from exc
    try:
        result = calculation.get(team_id)
    except KeyError as exc:
        raise typer.BadParameter(f"team_id={team_id} is not in the schedule", param_hint="--team-id") from exc

    suggested = suggest_coefficients(result, system_config.coefficients)
    typer.echo(
        f"system={system_config.name} team={result.team_name} rank={result.rank} rpi={result.rpi:.4f}"
    )
    current_values = system_config.coefficients.as_config_json()
    for key, value in suggested.as_config_json().items():
        marker = "" if value == current_values[key] else "  <- changed"
        typer.echo(f"{key:<22} {current_values[key]:>8.4g} -> {value:>8.4g}{marker}")


if __name__ == "__main__":
    app()
