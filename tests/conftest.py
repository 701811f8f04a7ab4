"""Shared schedule fixtures for RPI tests."""

from __future__ import annotations

import pytest

from domain.ratings.common import Game, Team
from domain.ratings.rpi.coefficients import RPICoefficients

TEAM_A = 1
TEAM_B = 2
TEAM_C = 3


def scored(opponent_id: int, team_score: int, opponent_score: int, **kwargs) -> Game:
    return Game(
        opponent_id=opponent_id,
        team_score=team_score,
        opponent_score=opponent_score,
        **kwargs,
    )


def build_round_robin() -> list[Team]:
    """Three teams, two meetings per pair, both sides of every game listed.

    A sits three competitive levels above B and C.
    """
    return [
        Team(
            team_id=TEAM_A,
            name="Team A",
            games=(
                scored(TEAM_B, 3, 1),
                scored(TEAM_B, 2, 0),
                scored(TEAM_C, 1, 2),
                scored(TEAM_C, 4, 1),
            ),
            competitive_level=3,
        ),
        Team(
            team_id=TEAM_B,
            name="Team B",
            games=(
                scored(TEAM_A, 1, 3),
                scored(TEAM_A, 0, 2),
                scored(TEAM_C, 2, 2),
                scored(TEAM_C, 3, 1),
            ),
            competitive_level=0,
        ),
        Team(
            team_id=TEAM_C,
            name="Team C",
            games=(
                scored(TEAM_A, 2, 1),
                scored(TEAM_A, 1, 4),
                scored(TEAM_B, 2, 2),
                scored(TEAM_B, 1, 3),
            ),
            competitive_level=0,
        ),
    ]


@pytest.fixture
def round_robin_teams() -> list[Team]:
    return build_round_robin()


@pytest.fixture
def round_robin_coefficients() -> RPICoefficients:
    return RPICoefficients(
        clwp_coeff=0.25,
        oclwp_coeff=0.5,
        ooclwp_coeff=0.25,
        diff_coeff=0.1,
        domination_coeff=0.1,
        clgw_step=0.05,
        clgl_step=0.1,
        min_games=3,
        diff_interval=2.0,
        domination_intervals=1.0,
    )
