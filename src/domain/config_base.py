"""TOML preset loading shared by the rating configs."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar
import tomllib


@dataclass(frozen=True)
class BaseSystemConfig:
    """Metadata every preset file carries in its ``[system]`` table."""

    name: str
    description: str | None
    file_path: Path

    def as_config_json(self) -> dict[str, Any]:
        raise NotImplementedError


T = TypeVar("T", bound=BaseSystemConfig)

NAME_ONLY: Mapping[str, str] = {"name": "system names"}


def load_system_configs(
    config_dir: Path,
    parser: Callable[[dict[str, Any], Path], T],
    *,
    duplicate_name_label: str = "rating",
    unique_fields: Mapping[str, str] = NAME_ONLY,
) -> list[T]:
    """Parse every ``*.toml`` preset in ``config_dir`` in file-name order.

    ``unique_fields`` maps an attribute of the parsed config to the plural
    used in the error raised when two files share a value for it.
    """
    if not config_dir.exists():
        raise FileNotFoundError(f"Config directory not found: {config_dir}")
    if not config_dir.is_dir():
        raise NotADirectoryError(f"Config path is not a directory: {config_dir}")

    config_files = sorted(config_dir.glob("*.toml"))
    if not config_files:
        raise ValueError(f"No .toml config files found in: {config_dir}")

    systems: list[T] = []
    for file_path in config_files:
        with file_path.open("rb") as file:
            systems.append(parser(tomllib.load(file), file_path))

    for attribute, plural in unique_fields.items():
        values = [getattr(system, attribute) for system in systems]
        if len(values) != len(set(values)):
            raise ValueError(
                f"Duplicate {duplicate_name_label} {plural} found in {config_dir}: {values}"
            )

    return systems


def parse_system_metadata(raw: dict[str, Any], file_path: Path) -> tuple[str, str | None]:
    """Return the required ``[system].name`` and optional description."""
    system_raw = raw.get("system", {})

    name = str(system_raw.get("name", "")).strip()
    if not name:
        raise ValueError(f"{file_path}: [system].name is required")

    description_value = system_raw.get("description")
    description = None if description_value is None else str(description_value)
    return name, description


__all__ = ["BaseSystemConfig", "load_system_configs", "parse_system_metadata"]
