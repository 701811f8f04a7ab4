"""Errors and per-record issues raised or reported by the RPI engine."""

from __future__ import annotations

from dataclasses import dataclass

from domain.ratings.protocol import IssueKind


class InvalidInputError(ValueError):
    """Input that cannot be rated at all (empty roster, bad coefficients)."""


class CalculationCancelledError(RuntimeError):
    """A recalculation was cancelled before it finished."""


@dataclass(frozen=True)
class InputIssue:
    """One game record that was left out of the calculation."""

    team_id: int
    game_index: int
    kind: IssueKind
    message: str


__all__ = ["CalculationCancelledError", "InputIssue", "InvalidInputError"]
