"""Load per-sport RPI presets from TOML files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from domain.config_base import BaseSystemConfig, load_system_configs, parse_system_metadata
from domain.ratings.rpi.coefficients import RPICoefficients, validate_coefficients
from domain.ratings.rpi.errors import InvalidInputError

_DEFAULTS = RPICoefficients()


@dataclass(frozen=True)
class RPISystemConfig(BaseSystemConfig):
    """One sport's coefficient preset."""

    sport_id: int
    display_name: str
    coefficients: RPICoefficients

    def as_config_json(self) -> dict[str, Any]:
        return {
            "sport_id": self.sport_id,
            "display_name": self.display_name,
            **self.coefficients.as_config_json(),
        }


def load_rpi_system_configs(config_dir: Path) -> list[RPISystemConfig]:
    """Load and validate all RPI preset TOML files in a directory."""
    return load_system_configs(
        config_dir,
        _parse_rpi_system_config,
        duplicate_name_label="rpi",
        unique_fields={"name": "system names", "sport_id": "sport ids"},
    )


def _parse_rpi_system_config(raw: dict[str, Any], file_path: Path) -> RPISystemConfig:
    name, description = parse_system_metadata(raw, file_path)
    system_raw = raw.get("system", {})
    rpi_raw = raw.get("rpi", {})

    sport_id = int(system_raw.get("sport_id", 0))
    if sport_id < 0:
        raise ValueError(f"{file_path}: [system].sport_id must be >= 0")
    display_name = str(system_raw.get("display_name", name))

    min_games_value = rpi_raw.get("min_games", _DEFAULTS.min_games)
    if not isinstance(min_games_value, int) or isinstance(min_games_value, bool):
        raise ValueError(f"{file_path}: [rpi].min_games must be an integer")

    coefficients = RPICoefficients(
        clwp_coeff=float(rpi_raw.get("clwp_coeff", _DEFAULTS.clwp_coeff)),
        oclwp_coeff=float(rpi_raw.get("oclwp_coeff", _DEFAULTS.oclwp_coeff)),
        ooclwp_coeff=float(rpi_raw.get("ooclwp_coeff", _DEFAULTS.ooclwp_coeff)),
        diff_coeff=float(rpi_raw.get("diff_coeff", _DEFAULTS.diff_coeff)),
        domination_coeff=float(rpi_raw.get("domination_coeff", _DEFAULTS.domination_coeff)),
        clgw_step=float(rpi_raw.get("clgw_step", _DEFAULTS.clgw_step)),
        clgl_step=float(rpi_raw.get("clgl_step", _DEFAULTS.clgl_step)),
        min_games=min_games_value,
        diff_interval=float(rpi_raw.get("diff_interval", _DEFAULTS.diff_interval)),
        domination_intervals=float(
            rpi_raw.get("domination_intervals", _DEFAULTS.domination_intervals)
        ),
    )
    try:
        validate_coefficients(coefficients)
    except InvalidInputError as exc:
        raise ValueError(f"{file_path}: [rpi].{exc}") from exc

    return RPISystemConfig(
        name=name,
        description=description,
        file_path=file_path,
        sport_id=sport_id,
        display_name=display_name,
        coefficients=coefficients,
    )


__all__ = ["RPISystemConfig", "load_rpi_system_configs"]
