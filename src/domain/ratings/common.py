"""Shared types for team rating inputs."""

from __future__ import annotations

from dataclasses import dataclass

from domain.ratings.protocol import GameOutcome, GameStatus


@dataclass(frozen=True)
class Game:
    """One game as seen from the owning team's side."""

    opponent_id: int
    team_score: int | None = None
    opponent_score: int | None = None
    status: GameStatus = GameStatus.COMPLETED
    outcome: GameOutcome | None = None
    # Positive means the opponent is stronger. None falls back to the teams' competitive levels.
    level_diff: int | None = None

    @property
    def is_scored(self) -> bool:
        return self.team_score is not None and self.opponent_score is not None

    @property
    def margin(self) -> int | None:
        if self.team_score is None or self.opponent_score is None:
            return None
        return self.team_score - self.opponent_score

    @property
    def score_outcome(self) -> GameOutcome | None:
        margin = self.margin
        if margin is None:
            return None
        if margin > 0:
            return GameOutcome.WIN
        if margin < 0:
            return GameOutcome.LOSS
        return GameOutcome.TIE

    @property
    def resolved_outcome(self) -> GameOutcome | None:
        """Outcome from the scores, falling back to the explicit outcome."""
        scored = self.score_outcome
        if scored is not None:
            return scored
        return self.outcome


@dataclass(frozen=True)
class Team:
    """Canonical team payload with its games in a stable order."""

    team_id: int
    name: str
    games: tuple[Game, ...] = ()
    # Fixed strength class; opponent minus team gives a game's level differential.
    competitive_level: int | None = None
