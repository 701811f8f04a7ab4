"""Read team schedules from JSON dataset files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from domain.ratings.common import Game, Team
from domain.ratings.protocol import GameOutcome, GameStatus

log = logging.getLogger(__name__)


def load_schedule(path: Path) -> list[Team]:
    """Load teams and their games from a JSON file.

    Accepts a top-level list of teams or an object with a ``teams`` list.
    Keys may be snake_case or the camelCase used by dataset exports
    (``teamScore``, ``isWin``, ``competitiveLevelDiff`` ...).
    """
    if not path.exists():
        raise FileNotFoundError(f"Schedule file not found: {path}")

    with path.open("r", encoding="utf-8") as file:
        raw = json.load(file)

    teams_raw = raw.get("teams") if isinstance(raw, dict) else raw
    if not isinstance(teams_raw, list):
        raise ValueError(f"{path}: expected a list of teams or an object with a 'teams' list")

    teams = [_parse_team(team_raw, path, position) for position, team_raw in enumerate(teams_raw)]
    log.debug("Loaded schedule path=%s teams=%d", path, len(teams))
    return teams


def _first(raw: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in raw:
            return raw[key]
    return None


def _optional_int(value: Any, path: Path, label: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValueError(f"{path}: {label} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{path}: {label} must be an integer, got {value!r}") from exc


def _parse_team(raw: Any, path: Path, position: int) -> Team:
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: teams[{position}] must be an object")

    team_id = _optional_int(_first(raw, "team_id", "id"), path, f"teams[{position}].id")
    if team_id is None:
        raise ValueError(f"{path}: teams[{position}].id is required")

    name = _first(raw, "name", "team_name")
    games_raw = raw.get("games", [])
    if not isinstance(games_raw, list):
        raise ValueError(f"{path}: teams[{position}].games must be a list")

    return Team(
        team_id=team_id,
        name=str(name) if name is not None else str(team_id),
        games=tuple(
            _parse_game(game_raw, path, f"teams[{position}].games[{game_position}]")
            for game_position, game_raw in enumerate(games_raw)
        ),
        competitive_level=_optional_int(
            _first(raw, "competitive_level", "competitiveLevel"),
            path,
            f"teams[{position}].competitiveLevel",
        ),
    )


def _parse_game(raw: Any, path: Path, label: str) -> Game:
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: {label} must be an object")

    opponent_id = _optional_int(_first(raw, "opponent_id", "opponentId"), path, f"{label}.opponentId")
    if opponent_id is None:
        raise ValueError(f"{path}: {label}.opponentId is required")

    status_value = raw.get("status", GameStatus.COMPLETED.value)
    try:
        status = GameStatus(status_value)
    except ValueError as exc:
        raise ValueError(f"{path}: {label}.status has unknown value {status_value!r}") from exc

    return Game(
        opponent_id=opponent_id,
        team_score=_optional_int(_first(raw, "team_score", "teamScore"), path, f"{label}.teamScore"),
        opponent_score=_optional_int(
            _first(raw, "opponent_score", "opponentScore"), path, f"{label}.opponentScore"
        ),
        status=status,
        outcome=_parse_outcome(raw, path, label),
        level_diff=_optional_int(
            _first(raw, "level_diff", "competitiveLevelDiff"), path, f"{label}.competitiveLevelDiff"
        ),
    )


def _parse_outcome(raw: dict[str, Any], path: Path, label: str) -> GameOutcome | None:
    outcome_value = raw.get("outcome")
    if outcome_value is not None:
        try:
            return GameOutcome(outcome_value)
        except ValueError as exc:
            raise ValueError(f"{path}: {label}.outcome has unknown value {outcome_value!r}") from exc

    if _first(raw, "is_tie", "isTie"):
        return GameOutcome.TIE
    is_win = _first(raw, "is_win", "isWin")
    if is_win is None:
        return None
    return GameOutcome.WIN if is_win else GameOutcome.LOSS


__all__ = ["load_schedule"]
