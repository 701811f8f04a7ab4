"""Rank one schedule under one RPI preset."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from domain.ratings.common import Team
from domain.ratings.rpi.calculator import CancelCheck, RPICalculation, TeamRPICalculator
from domain.ratings.rpi.config import RPISystemConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankingSummary:
    """Outcome for one ranked schedule/preset pair."""

    system_name: str
    sport_id: int
    config_file: str
    teams: int
    rated_team_games: int
    reliable_teams: int
    issues: int
    top_team_id: int | None
    calculation: RPICalculation


def rank_schedule(
    *,
    teams: Sequence[Team],
    system_config: RPISystemConfig,
    max_workers: int | None = None,
    cancel_check: CancelCheck | None = None,
    echo: Callable[[str], None] | None = None,
) -> RankingSummary:
    """Run the RPI engine for one preset and summarize the result."""
    calculator = TeamRPICalculator(system_config.coefficients, max_workers=max_workers)
    calculation = calculator.calculate(teams, cancel_check=cancel_check)

    reliable = [result for result in calculation.results if result.reliable]
    summary = RankingSummary(
        system_name=system_config.name,
        sport_id=system_config.sport_id,
        config_file=system_config.file_path.name,
        teams=len(calculation.results),
        rated_team_games=sum(result.games for result in calculation.results),
        reliable_teams=len(reliable),
        issues=len(calculation.issues),
        top_team_id=calculation.results[0].team_id if calculation.results else None,
        calculation=calculation,
    )

    message = (
        "completed "
        f"config={summary.config_file} "
        f"system={summary.system_name} "
        f"sport_id={summary.sport_id} "
        f"teams={summary.teams} "
        f"rated_team_games={summary.rated_team_games} "
        f"reliable_teams={summary.reliable_teams} "
        f"issues={summary.issues}"
    )
    log.info(message)
    if echo is not None:
        echo(message)

    return summary


__all__ = ["RankingSummary", "rank_schedule"]
