"""Registry of per-sport RPI presets."""

from __future__ import annotations

from pathlib import Path

from domain.ratings.rpi.config import RPISystemConfig, load_rpi_system_configs

ROOT_DIR = Path(__file__).resolve().parents[3]
DEFAULT_CONFIG_DIR = ROOT_DIR / "configs" / "ratings" / "rpi"
DEFAULT_SPORT_ID = 0

_REGISTRY: dict[int, RPISystemConfig] = {}
_defaults_loaded = False


def register(config: RPISystemConfig) -> None:
    """Register one sport preset."""
    if config.sport_id in _REGISTRY:
        raise ValueError(f"Duplicate rpi preset registration for sport_id={config.sport_id}")
    if any(existing.name == config.name for existing in _REGISTRY.values()):
        raise ValueError(f"Duplicate rpi preset registration for name={config.name}")
    _REGISTRY[config.sport_id] = config


def get_all() -> list[RPISystemConfig]:
    """Return all registered presets in deterministic order."""
    _register_defaults()
    return [_REGISTRY[sport_id] for sport_id in sorted(_REGISTRY)]


def get(sport_id: int | None) -> RPISystemConfig:
    """Get the preset for a sport id, falling back to the default preset."""
    _register_defaults()
    if sport_id and sport_id in _REGISTRY:
        return _REGISTRY[sport_id]
    try:
        return _REGISTRY[DEFAULT_SPORT_ID]
    except KeyError as exc:
        raise KeyError(
            f"No default rpi preset registered (sport_id={DEFAULT_SPORT_ID})"
        ) from exc


def get_by_name(name: str) -> RPISystemConfig:
    """Get one preset by its ``[system].name``."""
    _register_defaults()
    for config in _REGISTRY.values():
        if config.name == name.lower():
            return config
    available = ", ".join(config.name for config in get_all())
    raise KeyError(f"No rpi preset registered for name={name}. Available: {available}")


def _register_defaults() -> None:
    global _defaults_loaded
    if _defaults_loaded:
        return
    taken_names = {config.name for config in _REGISTRY.values()}
    for config in load_rpi_system_configs(DEFAULT_CONFIG_DIR):
        # Presets registered before the defaults load keep their sport id and name.
        if config.sport_id in _REGISTRY or config.name in taken_names:
            continue
        register(config)
    _defaults_loaded = True


_register_defaults()


__all__ = [
    "DEFAULT_CONFIG_DIR",
    "DEFAULT_SPORT_ID",
    "get",
    "get_all",
    "get_by_name",
    "register",
]
