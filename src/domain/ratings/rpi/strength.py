"""Opponent (OCLWP) and opponents'-opponent (OOCLWP) schedule strength."""

from __future__ import annotations

from collections.abc import Iterable

from domain.ratings.rpi.level import CLWPCalculator
from domain.ratings.rpi.schedule import ScheduleGraph


def _mean(values: Iterable[float | None]) -> float | None:
    total = 0.0
    count = 0
    for value in values:
        if value is None:
            continue
        total += value
        count += 1
    if count == 0:
        return None
    return total / count


class ScheduleStrengthAggregator:
    """Self-excluding opponent aggregates for one calculation.

    ``OCLWP(T)`` averages, over T's distinct opponents O, the CLWP of O with
    its games against T removed. ``OOCLWP(T)`` averages, over the same O, the
    mean CLWP of O's other opponents P (P != T) with their games against O
    removed. Opponents with nothing left to average are omitted. The memo
    lives only as long as the aggregator, which is built per call.
    """

    def __init__(self, graph: ScheduleGraph, clwp_calculator: CLWPCalculator) -> None:
        self.graph = graph
        self.clwp_calculator = clwp_calculator
        self._clwp_without: dict[tuple[int, int], float | None] = {}

    def clwp_without(self, team_index: int, excluded_index: int) -> float | None:
        key = (team_index, excluded_index)
        if key not in self._clwp_without:
            self._clwp_without[key] = self.clwp_calculator.clwp(team_index, exclude=excluded_index)
        return self._clwp_without[key]

    def oclwp(self, team_index: int) -> float | None:
        return _mean(
            self.clwp_without(opponent_index, team_index)
            for opponent_index in self.graph.opponents[team_index]
        )

    def opponent_oclwp(self, opponent_index: int, rated_team_index: int) -> float | None:
        """OCLWP of an opponent with the rated team dropped from its opponent list."""
        return _mean(
            self.clwp_without(second_index, opponent_index)
            for second_index in self.graph.opponents[opponent_index]
            if second_index != rated_team_index
        )

    def ooclwp(self, team_index: int) -> float | None:
        return _mean(
            self.opponent_oclwp(opponent_index, team_index)
            for opponent_index in self.graph.opponents[team_index]
        )


__all__ = ["ScheduleStrengthAggregator"]
