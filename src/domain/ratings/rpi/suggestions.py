"""What-if coefficient suggestions for a single team's RPI breakdown."""

from __future__ import annotations

from dataclasses import replace

from domain.ratings.rpi.calculator import TeamRPIResult
from domain.ratings.rpi.coefficients import RPICoefficients

STRONG_WIN_RATE = 0.7
WEAK_WIN_RATE = 0.3
STEP_ADJUSTMENT = 0.02
MAX_CLGW_STEP = 0.1
MIN_CLGL_STEP = 0.05


def suggest_coefficients(result: TeamRPIResult, defaults: RPICoefficients) -> RPICoefficients:
    """Propose coefficients matching where ``result``'s rating comes from.

    The three schedule-strength weights are re-split in proportion to how much
    each level currently contributes to the team's rating while keeping their
    total. Margin and domination weights stay at ``defaults``. Nothing is
    recalculated; callers decide whether to apply the suggestion.
    """
    weights = (defaults.clwp_coeff, defaults.oclwp_coeff, defaults.ooclwp_coeff)
    contributions = (
        defaults.clwp_coeff * result.clwp,
        defaults.oclwp_coeff * result.oclwp,
        defaults.ooclwp_coeff * result.ooclwp,
    )
    contribution_total = sum(contributions)
    if contribution_total > 0.0:
        weight_total = sum(weights)
        weights = tuple(weight_total * part / contribution_total for part in contributions)

    min_games = defaults.min_games
    if result.games < defaults.min_games:
        min_games = max(1, result.games)

    clgw_step = defaults.clgw_step
    clgl_step = defaults.clgl_step
    if result.games > 0:
        win_rate = result.wins / result.games
        if win_rate > STRONG_WIN_RATE:
            clgw_step = min(MAX_CLGW_STEP, defaults.clgw_step + STEP_ADJUSTMENT)
        elif win_rate < WEAK_WIN_RATE:
            clgl_step = max(MIN_CLGL_STEP, defaults.clgl_step - STEP_ADJUSTMENT)

    return replace(
        defaults,
        clwp_coeff=weights[0],
        oclwp_coeff=weights[1],
        ooclwp_coeff=weights[2],
        min_games=min_games,
        clgw_step=clgw_step,
        clgl_step=clgl_step,
    )


__all__ = ["suggest_coefficients"]
