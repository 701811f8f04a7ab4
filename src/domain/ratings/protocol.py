"""Shared enums for rating inputs."""

from __future__ import annotations

from enum import Enum


class GameStatus(str, Enum):
    """Lifecycle state of one scheduled game."""

    COMPLETED = "completed"
    IN_PROGRESS = "in_progress"
    TO_BE_PLAYED = "to_be_played"
    CANCELLED = "cancelled"


class GameOutcome(str, Enum):
    """Result of one game from the owning team's perspective."""

    WIN = "win"
    LOSS = "loss"
    TIE = "tie"


class IssueKind(str, Enum):
    """Why a game record was left out of a calculation."""

    NEGATIVE_SCORE = "negative_score"
    UNKNOWN_OPPONENT = "unknown_opponent"
    SELF_OPPONENT = "self_opponent"
    UNRESOLVED_OUTCOME = "unresolved_outcome"
    CONFLICTING_OUTCOME = "conflicting_outcome"


__all__ = [
    "GameOutcome",
    "GameStatus",
    "IssueKind",
]
