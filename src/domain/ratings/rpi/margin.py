"""Score-margin (DIFF) and domination terms."""

from __future__ import annotations

from collections.abc import Sequence

from domain.ratings.protocol import GameOutcome
from domain.ratings.rpi.coefficients import RPICoefficients
from domain.ratings.rpi.schedule import RatedGame


def calculate_diff(games: Sequence[RatedGame], coefficients: RPICoefficients) -> float:
    """Average margin in units of ``diff_interval``, clamped to [-1, 1].

    Games decided by an explicit outcome carry no margin and are skipped.
    """
    margins = [rated.game.margin for rated in games if rated.game.margin is not None]
    if not margins:
        return 0.0
    average = sum(margins) / len(margins)
    return max(-1.0, min(average / coefficients.diff_interval, 1.0))


def calculate_domination(games: Sequence[RatedGame], coefficients: RPICoefficients) -> float:
    """Share of a team's wins that came by more than the lopsided margin.

    Wins decided by an explicit outcome count as wins but never as lopsided.
    """
    wins = [rated for rated in games if rated.outcome == GameOutcome.WIN]
    if not wins:
        return 0.0
    threshold = coefficients.lopsided_margin
    lopsided_wins = sum(
        1 for rated in wins if rated.game.margin is not None and rated.game.margin > threshold
    )
    return lopsided_wins / len(wins)


__all__ = ["calculate_diff", "calculate_domination"]
