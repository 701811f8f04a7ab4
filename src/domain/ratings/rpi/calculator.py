"""Team-level RPI calculation and ranking."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, replace
from types import MappingProxyType

from domain.ratings.common import Team
from domain.ratings.rpi.coefficients import RPICoefficients, validate_coefficients
from domain.ratings.rpi.errors import CalculationCancelledError, InputIssue
from domain.ratings.rpi.level import CLWPCalculator, clamp_unit
from domain.ratings.rpi.margin import calculate_diff, calculate_domination
from domain.ratings.rpi.schedule import ScheduleGraph, build_schedule_graph
from domain.ratings.rpi.strength import ScheduleStrengthAggregator
from domain.ratings.rpi.win_percentage import count_record

log = logging.getLogger(__name__)

CancelCheck = Callable[[], bool]


@dataclass(frozen=True)
class TeamRPIResult:
    team_id: int
    team_name: str
    games: int
    wins: int
    losses: int
    ties: int
    unrated_games: int
    wp: float
    clwp: float
    oclwp: float
    ooclwp: float
    diff: float
    domination: float
    rpi: float
    reliable: bool
    rank: int = 0


@dataclass(frozen=True)
class RPICalculation:
    """Ranked results for one roster plus the game records that were skipped."""

    results: tuple[TeamRPIResult, ...]
    issues: tuple[InputIssue, ...] = ()

    def by_team_id(self) -> Mapping[int, TeamRPIResult]:
        return MappingProxyType({result.team_id: result for result in self.results})

    def get(self, team_id: int) -> TeamRPIResult:
        for result in self.results:
            if result.team_id == team_id:
                return result
        raise KeyError(f"No RPI result for team_id={team_id}")


def composite_rpi(
    *,
    clwp: float,
    oclwp: float,
    ooclwp: float,
    diff: float,
    domination: float,
    coefficients: RPICoefficients,
) -> float:
    """Weighted blend of the rating components, clamped to [0, 1]."""
    raw = (
        coefficients.clwp_coeff * clwp
        + coefficients.oclwp_coeff * oclwp
        + coefficients.ooclwp_coeff * ooclwp
        + coefficients.diff_coeff * diff
        + coefficients.domination_coeff * domination
    )
    return clamp_unit(raw)


def ranking_key(result: TeamRPIResult) -> tuple[bool, float, float, int, int]:
    """Reliable teams first, then RPI, WP, fewest losses and team id."""
    return (not result.reliable, -result.rpi, -result.wp, result.losses, result.team_id)


class TeamRPICalculator:
    """Stateless RPI engine bound to one coefficient set."""

    def __init__(self, params: RPICoefficients, *, max_workers: int | None = None) -> None:
        validate_coefficients(params)
        if max_workers is not None and max_workers <= 0:
            raise ValueError("max_workers must be greater than 0")
        self.params = params
        self.max_workers = max_workers

    def calculate(
        self,
        teams: Sequence[Team],
        *,
        cancel_check: CancelCheck | None = None,
    ) -> RPICalculation:
        graph = build_schedule_graph(teams)
        clwp_calculator = CLWPCalculator(graph, self.params)
        aggregator = ScheduleStrengthAggregator(graph, clwp_calculator)

        def aggregate(team_index: int) -> TeamRPIResult:
            if cancel_check is not None and cancel_check():
                raise CalculationCancelledError(
                    f"RPI calculation cancelled before team_id={graph.teams[team_index].team_id}"
                )
            return self._team_result(
                graph=graph,
                team_index=team_index,
                clwp_calculator=clwp_calculator,
                aggregator=aggregator,
            )

        team_indices = range(len(graph))
        if self.max_workers is not None and self.max_workers > 1 and len(graph) > 1:
            with ThreadPoolExecutor(max_workers=min(self.max_workers, len(graph))) as executor:
                unranked = list(executor.map(aggregate, team_indices))
        else:
            unranked = [aggregate(team_index) for team_index in team_indices]

        ranked = tuple(
            replace(result, rank=rank)
            for rank, result in enumerate(sorted(unranked, key=ranking_key), start=1)
        )
        log.debug(
            "Calculated RPI teams=%d rated_games=%d issues=%d",
            len(ranked),
            graph.rated_game_count(),
            len(graph.issues),
        )
        return RPICalculation(results=ranked, issues=graph.issues)

    def _team_result(
        self,
        *,
        graph: ScheduleGraph,
        team_index: int,
        clwp_calculator: CLWPCalculator,
        aggregator: ScheduleStrengthAggregator,
    ) -> TeamRPIResult:
        team = graph.teams[team_index]
        games = graph.rated_games[team_index]
        record = count_record(games)

        clwp = clwp_calculator.clwp(team_index) or 0.0
        oclwp = aggregator.oclwp(team_index) or 0.0
        ooclwp = aggregator.ooclwp(team_index) or 0.0
        diff = calculate_diff(games, self.params)
        domination = calculate_domination(games, self.params)

        return TeamRPIResult(
            team_id=team.team_id,
            team_name=team.name,
            games=record.games,
            wins=record.wins,
            losses=record.losses,
            ties=record.ties,
            unrated_games=graph.unrated_counts[team_index],
            wp=record.win_percentage,
            clwp=clwp,
            oclwp=oclwp,
            ooclwp=ooclwp,
            diff=diff,
            domination=domination,
            rpi=composite_rpi(
                clwp=clwp,
                oclwp=oclwp,
                ooclwp=ooclwp,
                diff=diff,
                domination=domination,
                coefficients=self.params,
            ),
            reliable=record.games >= self.params.min_games,
        )


def calculate_all_teams_rpi(
    teams: Sequence[Team],
    coefficients: RPICoefficients,
    *,
    max_workers: int | None = None,
    cancel_check: CancelCheck | None = None,
) -> RPICalculation:
    """Rate and rank every team in one pass over an immutable snapshot."""
    calculator = TeamRPICalculator(coefficients, max_workers=max_workers)
    return calculator.calculate(teams, cancel_check=cancel_check)


__all__ = [
    "RPICalculation",
    "TeamRPICalculator",
    "TeamRPIResult",
    "calculate_all_teams_rpi",
    "composite_rpi",
    "ranking_key",
]
