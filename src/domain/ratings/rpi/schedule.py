"""Index-based schedule graph built once per RPI calculation."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from domain.ratings.common import Game, Team
from domain.ratings.protocol import GameOutcome, GameStatus, IssueKind
from domain.ratings.rpi.errors import InputIssue, InvalidInputError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RatedGame:
    """A validated, completed game pointing at its opponent by index."""

    opponent_index: int
    outcome: GameOutcome
    game: Game


@dataclass(frozen=True)
class ScheduleGraph:
    """Immutable arena of teams with index-based opponent lookup.

    ``rated_games[i]`` holds the games of ``teams[i]`` that take part in the
    rating math and ``opponents[i]`` the distinct opponent indices drawn from
    those games, in ascending order.
    """

    teams: tuple[Team, ...]
    index_by_id: Mapping[int, int]
    rated_games: tuple[tuple[RatedGame, ...], ...]
    opponents: tuple[tuple[int, ...], ...]
    unrated_counts: tuple[int, ...]
    issues: tuple[InputIssue, ...]

    def __len__(self) -> int:
        return len(self.teams)

    def rated_game_count(self) -> int:
        return sum(len(games) for games in self.rated_games)


def build_schedule_graph(teams: Sequence[Team]) -> ScheduleGraph:
    """Validate teams and index their rated games.

    Raises ``InvalidInputError`` for an empty roster or duplicate team ids.
    Problems with single games are collected as issues and the game is left
    out; the rest of the roster is still rated.
    """
    if not teams:
        raise InvalidInputError("at least one team is required")

    index_by_id: dict[int, int] = {}
    for index, team in enumerate(teams):
        if team.team_id in index_by_id:
            raise InvalidInputError(f"duplicate team_id={team.team_id}")
        index_by_id[team.team_id] = index

    issues: list[InputIssue] = []
    rated_games: list[tuple[RatedGame, ...]] = []
    opponents: list[tuple[int, ...]] = []
    unrated_counts: list[int] = []

    for team in teams:
        team_rated: list[RatedGame] = []
        for game_index, game in enumerate(team.games):
            issue = _check_game(team, game_index, game, index_by_id)
            if issue is not None:
                log.warning(
                    "Skipping game team_id=%s game_index=%s: %s",
                    team.team_id,
                    game_index,
                    issue.message,
                )
                issues.append(issue)
                continue

            outcome = game.resolved_outcome
            if game.status != GameStatus.COMPLETED or outcome is None:
                continue
            team_rated.append(
                RatedGame(
                    opponent_index=index_by_id[game.opponent_id],
                    outcome=outcome,
                    game=game,
                )
            )

        rated_games.append(tuple(team_rated))
        opponents.append(tuple(sorted({rated.opponent_index for rated in team_rated})))
        unrated_counts.append(len(team.games) - len(team_rated))

    graph = ScheduleGraph(
        teams=tuple(teams),
        index_by_id=MappingProxyType(index_by_id),
        rated_games=tuple(rated_games),
        opponents=tuple(opponents),
        unrated_counts=tuple(unrated_counts),
        issues=tuple(issues),
    )
    log.debug(
        "Built schedule graph teams=%d rated_games=%d issues=%d",
        len(graph),
        graph.rated_game_count(),
        len(issues),
    )
    return graph


def _check_game(
    team: Team,
    game_index: int,
    game: Game,
    index_by_id: Mapping[int, int],
) -> InputIssue | None:
    def issue(kind: IssueKind, message: str) -> InputIssue:
        return InputIssue(team_id=team.team_id, game_index=game_index, kind=kind, message=message)

    if (game.team_score is not None and game.team_score < 0) or (
        game.opponent_score is not None and game.opponent_score < 0
    ):
        return issue(
            IssueKind.NEGATIVE_SCORE,
            f"negative score {game.team_score}-{game.opponent_score}",
        )
    if game.opponent_id == team.team_id:
        return issue(IssueKind.SELF_OPPONENT, "game lists the team as its own opponent")
    if game.opponent_id not in index_by_id:
        return issue(
            IssueKind.UNKNOWN_OPPONENT,
            f"opponent_id={game.opponent_id} is not in the roster",
        )

    if game.status != GameStatus.COMPLETED:
        return None
    if game.resolved_outcome is None:
        return issue(
            IssueKind.UNRESOLVED_OUTCOME,
            "completed game has neither both scores nor an explicit outcome",
        )
    scored = game.score_outcome
    if scored is not None and game.outcome is not None and game.outcome != scored:
        return issue(
            IssueKind.CONFLICTING_OUTCOME,
            f"explicit outcome {game.outcome.value} contradicts score "
            f"{game.team_score}-{game.opponent_score}",
        )
    return None


__all__ = ["RatedGame", "ScheduleGraph", "build_schedule_graph"]
