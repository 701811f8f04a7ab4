"""Contest-level win percentage (CLWP).

A plain win is worth 1.0 and a tie 0.5. Beating an opponent that sits at
least one strength level above earns ``clgw_step`` per level on top of the
win; losing to an opponent at least one level below costs ``clgl_step`` per
level. A game's level differential is its explicit ``level_diff``, else the
gap between the two teams' ``competitive_level`` values, else 0. Levels never
follow results, so an extra win can only raise a team's CLWP.
"""

from __future__ import annotations

from domain.ratings.protocol import GameOutcome
from domain.ratings.rpi.coefficients import RPICoefficients
from domain.ratings.rpi.schedule import RatedGame, ScheduleGraph


def adjusted_game_value(
    outcome: GameOutcome,
    level_diff: int,
    coefficients: RPICoefficients,
) -> float:
    if outcome == GameOutcome.TIE:
        return 0.5
    if outcome == GameOutcome.WIN:
        if level_diff > 0:
            return 1.0 + coefficients.clgw_step * level_diff
        return 1.0
    if level_diff < 0:
        return -coefficients.clgl_step * abs(level_diff)
    return 0.0


def clamp_unit(value: float) -> float:
    return max(0.0, min(value, 1.0))


class CLWPCalculator:
    """Level-adjusted win percentage over one schedule snapshot."""

    def __init__(self, graph: ScheduleGraph, coefficients: RPICoefficients) -> None:
        self.graph = graph
        self.coefficients = coefficients

    def game_level_diff(self, team_index: int, rated: RatedGame) -> int:
        if rated.game.level_diff is not None:
            return rated.game.level_diff
        team_level = self.graph.teams[team_index].competitive_level
        opponent_level = self.graph.teams[rated.opponent_index].competitive_level
        if team_level is None or opponent_level is None:
            return 0
        return opponent_level - team_level

    def clwp(self, team_index: int, *, exclude: int | None = None) -> float | None:
        """CLWP of one team, ignoring games against ``exclude``.

        Returns None when no rated games remain so aggregators can omit the
        team instead of counting it as 0.
        """
        total = 0.0
        counted = 0
        for rated in self.graph.rated_games[team_index]:
            if rated.opponent_index == exclude:
                continue
            total += adjusted_game_value(
                rated.outcome,
                self.game_level_diff(team_index, rated),
                self.coefficients,
            )
            counted += 1

        if counted == 0:
            return None
        return clamp_unit(total / counted)


__all__ = ["CLWPCalculator", "adjusted_game_value", "clamp_unit"]
