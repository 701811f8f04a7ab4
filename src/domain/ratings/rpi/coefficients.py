"""RPI coefficient set and its validation."""

from __future__ import annotations

from dataclasses import dataclass, fields
from math import isfinite
from typing import Any

from domain.ratings.rpi.errors import InvalidInputError

_NON_NEGATIVE_FIELDS = (
    "clwp_coeff",
    "oclwp_coeff",
    "ooclwp_coeff",
    "diff_coeff",
    "domination_coeff",
    "clgw_step",
    "clgl_step",
)


@dataclass(frozen=True)
class RPICoefficients:
    clwp_coeff: float = 0.9
    oclwp_coeff: float = 0.1
    ooclwp_coeff: float = 0.1
    diff_coeff: float = 0.1
    domination_coeff: float = 0.1
    clgw_step: float = 0.05
    clgl_step: float = 0.1
    min_games: int = 3
    diff_interval: float = 15.0
    domination_intervals: float = 2.0

    @property
    def lopsided_margin(self) -> float:
        """Margin a win must exceed to count as dominating."""
        return self.domination_intervals * self.diff_interval

    def as_config_json(self) -> dict[str, Any]:
        return {field.name: getattr(self, field.name) for field in fields(self)}


def validate_coefficients(coefficients: RPICoefficients) -> None:
    """Reject coefficient sets the engine cannot compute with."""
    for field in fields(coefficients):
        value = getattr(coefficients, field.name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidInputError(f"{field.name} must be a number, got {value!r}")
        if not isfinite(value):
            raise InvalidInputError(f"{field.name} must be finite, got {value!r}")

    for name in _NON_NEGATIVE_FIELDS:
        if getattr(coefficients, name) < 0.0:
            raise InvalidInputError(f"{name} must be >= 0")

    if int(coefficients.min_games) != coefficients.min_games or coefficients.min_games < 1:
        raise InvalidInputError("min_games must be an integer >= 1")
    if coefficients.diff_interval <= 0.0:
        raise InvalidInputError("diff_interval must be > 0")
    if coefficients.domination_intervals < 0.0:
        raise InvalidInputError("domination_intervals must be >= 0")


__all__ = ["RPICoefficients", "validate_coefficients"]
