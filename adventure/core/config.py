from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import yaml

from adventure.core.aliases import DEFAULT_ALIASES, build_alias_table


SAMPLE_WORLD = Path(__file__).resolve().parent.parent / "worlds" / "sample.json"


@dataclass(frozen=True)
class AdventureConfig:
    world_path: str = str(SAMPLE_WORLD)
    aliases: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_ALIASES))
    log_level: str = "WARNING"


class ConfigError(ValueError):
    """Raised when the config file has the wrong shape."""


LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _section(raw: dict[str, Any], key: str) -> dict[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{key}' must be a mapping")
    return value


def load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {p} must contain a mapping")
    return data


def load_config(path: str | Path) -> AdventureConfig:
    config_path = Path(path).resolve()
    raw = load_yaml(config_path)

    world_path = _section(raw, "world").get("path")
    if world_path is None:
        world_path = str(SAMPLE_WORLD)
    elif not isinstance(world_path, str):
        raise ConfigError("'world.path' must be a string")
    elif not Path(world_path).is_absolute():
        world_path = str((config_path.parent / world_path).resolve())

    aliases = build_alias_table(_section(raw, "aliases"))

    log_level = str(_section(raw, "logging").get("level", "WARNING")).upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"unknown log level {log_level}")

    return AdventureConfig(world_path=world_path, aliases=aliases, log_level=log_level)
