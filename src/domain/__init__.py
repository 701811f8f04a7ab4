"""Schedule and team-rating domain modules."""

from domain.ratings.common import Game, Team
from domain.ratings.protocol import GameOutcome, GameStatus

__all__ = ["Game", "GameOutcome", "GameStatus", "Team"]
