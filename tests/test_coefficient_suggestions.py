"""Tests for per-team coefficient suggestions."""

from __future__ import annotations

import pytest

from domain.ratings.rpi.calculator import TeamRPIResult
from domain.ratings.rpi.coefficients import RPICoefficients
from domain.ratings.rpi.suggestions import suggest_coefficients

DEFAULTS = RPICoefficients(
    clwp_coeff=0.25,
    oclwp_coeff=0.5,
    ooclwp_coeff=0.25,
    diff_coeff=0.08,
    domination_coeff=0.1,
    clgw_step=0.05,
    clgl_step=0.1,
    min_games=4,
    diff_interval=3.0,
)


def _result(*, clwp: float, oclwp: float, ooclwp: float, games: int, wins: int) -> TeamRPIResult:
    return TeamRPIResult(
        team_id=7,
        team_name="Team 7",
        games=games,
        wins=wins,
        losses=games - wins,
        ties=0,
        unrated_games=0,
        wp=wins / games if games else 0.0,
        clwp=clwp,
        oclwp=oclwp,
        ooclwp=ooclwp,
        diff=0.2,
        domination=0.1,
        rpi=0.5,
        reliable=games >= DEFAULTS.min_games,
        rank=1,
    )


def test_weights_follow_component_contributions() -> None:
    suggestion = suggest_coefficients(
        _result(clwp=0.8, oclwp=0.4, ooclwp=0.0, games=10, wins=8),
        DEFAULTS,
    )

    assert suggestion.clwp_coeff == pytest.approx(0.5)
    assert suggestion.oclwp_coeff == pytest.approx(0.5)
    assert suggestion.ooclwp_coeff == pytest.approx(0.0)
    assert suggestion.clwp_coeff + suggestion.oclwp_coeff + suggestion.ooclwp_coeff == pytest.approx(1.0)
    assert suggestion.clgw_step == pytest.approx(0.07)
    assert suggestion.clgl_step == pytest.approx(0.1)
    assert suggestion.min_games == 4


def test_margin_weights_are_left_alone() -> None:
    suggestion = suggest_coefficients(
        _result(clwp=0.3, oclwp=0.6, ooclwp=0.9, games=6, wins=3),
        DEFAULTS,
    )

    assert suggestion.diff_coeff == DEFAULTS.diff_coeff
    assert suggestion.domination_coeff == DEFAULTS.domination_coeff
    assert suggestion.diff_interval == DEFAULTS.diff_interval
    assert suggestion.clgw_step == DEFAULTS.clgw_step
    assert suggestion.clgl_step == DEFAULTS.clgl_step


def test_team_without_games_keeps_weights_and_lowers_threshold() -> None:
    suggestion = suggest_coefficients(
        _result(clwp=0.0, oclwp=0.0, ooclwp=0.0, games=0, wins=0),
        DEFAULTS,
    )

    assert (suggestion.clwp_coeff, suggestion.oclwp_coeff, suggestion.ooclwp_coeff) == (0.25, 0.5, 0.25)
    assert suggestion.min_games == 1


def test_short_schedule_sets_threshold_to_games_played() -> None:
    suggestion = suggest_coefficients(
        _result(clwp=0.5, oclwp=0.5, ooclwp=0.5, games=2, wins=1),
        DEFAULTS,
    )

    assert suggestion.min_games == 2


def test_weak_team_softens_bad_loss_penalty() -> None:
    suggestion = suggest_coefficients(
        _result(clwp=0.2, oclwp=0.5, ooclwp=0.5, games=10, wins=2),
        DEFAULTS,
    )

    assert suggestion.clgl_step == pytest.approx(0.08)
    assert suggestion.clgw_step == pytest.approx(0.05)


def test_step_adjustments_respect_bounds() -> None:
    tuned = RPICoefficients(clgw_step=0.09, clgl_step=0.06)

    strong = suggest_coefficients(_result(clwp=1.0, oclwp=0.5, ooclwp=0.5, games=5, wins=5), tuned)
    weak = suggest_coefficients(_result(clwp=0.0, oclwp=0.5, ooclwp=0.5, games=5, wins=0), tuned)

    assert strong.clgw_step == pytest.approx(0.1)
    assert weak.clgl_step == pytest.approx(0.05)


def test_suggestion_does_not_mutate_defaults() -> None:
    before = DEFAULTS.as_config_json()
    suggest_coefficients(_result(clwp=0.9, oclwp=0.1, ooclwp=0.1, games=10, wins=9), DEFAULTS)

    assert DEFAULTS.as_config_json() == before
