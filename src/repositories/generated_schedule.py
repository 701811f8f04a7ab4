"""Synthetic rosters for exercising the RPI engine at scale."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass
from math import floor

from domain.ratings.common import Game, Team

log = logging.getLogger(__name__)

DEFAULT_COMPETITIVE_LEVELS = tuple(range(1, 11))


@dataclass(frozen=True)
class DatasetStats:
    team_count: int
    total_games: int
    unique_opponent_pairs: int
    average_games_per_team: float
    # Each rated game is looked up once for OCLWP and once for OOCLWP.
    estimated_lookups: int


def generate_schedule(
    *,
    team_count: int = 100,
    games_per_team: int = 50,
    competitive_levels: Sequence[int] = DEFAULT_COMPETITIVE_LEVELS,
    seed: int | None = None,
) -> list[Team]:
    """Build a roster where every game is recorded by both teams.

    Pairings follow a round-robin rotation over a shuffled order, so no pair
    meets twice. With an odd ``team_count`` one team sits out each round.
    Stronger competitive levels score more on average and scores never tie.
    """
    if team_count < 2:
        raise ValueError("team_count must be at least 2")
    if games_per_team < 0:
        raise ValueError("games_per_team must be >= 0")
    if not competitive_levels:
        raise ValueError("competitive_levels must not be empty")

    slots: list[int | None] = list(range(1, team_count + 1))
    if team_count % 2:
        slots.append(None)
    if games_per_team > len(slots) - 1:
        raise ValueError(
            f"games_per_team={games_per_team} needs more than {team_count} teams "
            "to avoid repeat pairings"
        )

    rng = random.Random(seed)
    levels = {team_id: rng.choice(competitive_levels) for team_id in range(1, team_count + 1)}
    games: dict[int, list[Game]] = {team_id: [] for team_id in levels}
    rng.shuffle(slots)

    for _ in range(games_per_team):
        half = len(slots) // 2
        for home, away in zip(slots[:half], reversed(slots[half:])):
            if home is None or away is None:
                continue
            home_score, away_score = _game_scores(rng, levels[home], levels[away])
            games[home].append(
                Game(
                    opponent_id=away,
                    team_score=home_score,
                    opponent_score=away_score,
                    level_diff=levels[away] - levels[home],
                )
            )
            games[away].append(
                Game(
                    opponent_id=home,
                    team_score=away_score,
                    opponent_score=home_score,
                    level_diff=levels[home] - levels[away],
                )
            )
        slots = [slots[0], slots[-1], *slots[1:-1]]

    teams = [
        Team(
            team_id=team_id,
            name=f"Team {team_id:03d}",
            games=tuple(games[team_id]),
            competitive_level=levels[team_id],
        )
        for team_id in range(1, team_count + 1)
    ]
    log.debug(
        "Generated schedule teams=%d games_per_team=%d seed=%s",
        team_count,
        games_per_team,
        seed,
    )
    return teams


def _game_scores(rng: random.Random, level: int, opponent_level: int) -> tuple[int, int]:
    team_score = _score(rng, level)
    opponent_score = _score(rng, opponent_level)
    if team_score == opponent_score:
        if rng.random() > 0.5:
            team_score += 1
        else:
            opponent_score += 1
    return team_score, opponent_score


def _score(rng: random.Random, level: int) -> int:
    base = 50 + level * 5 + rng.random() * 30
    return max(0, floor(base + (rng.random() - 0.5) * 20))


def dataset_stats(teams: Sequence[Team]) -> DatasetStats:
    """Size figures for a roster, used to judge how heavy a rating run is."""
    total_games = sum(len(team.games) for team in teams)
    pairs = {
        (min(team.team_id, game.opponent_id), max(team.team_id, game.opponent_id))
        for team in teams
        for game in team.games
    }
    average = total_games / len(teams) if teams else 0.0
    return DatasetStats(
        team_count=len(teams),
        total_games=total_games,
        unique_opponent_pairs=len(pairs),
        average_games_per_team=round(average, 2),
        estimated_lookups=total_games * 2,
    )


__all__ = [
    "DEFAULT_COMPETITIVE_LEVELS",
    "DatasetStats",
    "dataset_stats",
    "generate_schedule",
]
