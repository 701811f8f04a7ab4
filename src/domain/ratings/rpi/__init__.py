"""RPI (rating percentage index) modules."""

from domain.ratings.rpi.calculator import (
    RPICalculation,
    TeamRPICalculator,
    TeamRPIResult,
    calculate_all_teams_rpi,
    composite_rpi,
)
from domain.ratings.rpi.coefficients import RPICoefficients, validate_coefficients
from domain.ratings.rpi.config import RPISystemConfig, load_rpi_system_configs
from domain.ratings.rpi.errors import CalculationCancelledError, InputIssue, InvalidInputError
from domain.ratings.rpi.suggestions import suggest_coefficients

__all__ = [
    "CalculationCancelledError",
    "InputIssue",
    "InvalidInputError",
    "RPICalculation",
    "RPICoefficients",
    "RPISystemConfig",
    "TeamRPICalculator",
    "TeamRPIResult",
    "calculate_all_teams_rpi",
    "composite_rpi",
    "load_rpi_system_configs",
    "suggest_coefficients",
    "validate_coefficients",
]
