"""Rating-system domain modules."""

from domain.ratings.common import Game, Team
from domain.ratings.protocol import GameOutcome, GameStatus, IssueKind

__all__ = [
    "Game",
    "GameOutcome",
    "GameStatus",
    "IssueKind",
    "Team",
]
