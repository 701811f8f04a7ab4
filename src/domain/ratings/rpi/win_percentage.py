"""Direct win/loss/tie record and win percentage."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from domain.ratings.protocol import GameOutcome
from domain.ratings.rpi.schedule import RatedGame, ScheduleGraph


@dataclass(frozen=True)
class TeamRecord:
    wins: int = 0
    losses: int = 0
    ties: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.losses + self.ties

    @property
    def win_percentage(self) -> float:
        if self.games == 0:
            return 0.0
        return (self.wins + 0.5 * self.ties) / self.games


def count_record(games: Iterable[RatedGame]) -> TeamRecord:
    wins = losses = ties = 0
    for rated in games:
        if rated.outcome == GameOutcome.WIN:
            wins += 1
        elif rated.outcome == GameOutcome.LOSS:
            losses += 1
        else:
            ties += 1
    return TeamRecord(wins=wins, losses=losses, ties=ties)


def calculate_win_percentages(graph: ScheduleGraph) -> tuple[float, ...]:
    """Return WP for every team in graph order."""
    return tuple(count_record(games).win_percentage for games in graph.rated_games)


__all__ = ["TeamRecord", "calculate_win_percentages", "count_record"]
