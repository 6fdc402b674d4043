"""Runtime settings for loading battle params and parsing maps.

Defaults match a stock server data layout. Every field can be overridden
from the environment with from_env().
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path


DEFAULT_BATTLE_PARAMS_PREFIX = Path("system/blueburst/BattleParamEntry")

_ENV_PREFIX = "PSO_MAPPER_"
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


def _parse_bool(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name}: expected a boolean, got {raw!r}")


def _parse_log_level(name: str, raw: str) -> str:
    level = raw.strip().upper()
    # getLevelName maps a registered name to its number, anything else to a str
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{name}: expected a logging level name, got {raw!r}")
    return level


@dataclass(slots=True)
class MapperConfig:
    """Settings the game instance manager passes down to the parsers."""

    battle_params_prefix: Path = DEFAULT_BATTLE_PARAMS_PREFIX
    solo: bool = False
    alt_enemies: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "MapperConfig":
        """Build a config from PSO_MAPPER_* variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        config = cls()
        prefix = env.get(f"{_ENV_PREFIX}BATTLE_PARAMS_PREFIX")
        if prefix:
            config.battle_params_prefix = Path(prefix)
        for name in ("solo", "alt_enemies"):
            key = f"{_ENV_PREFIX}{name.upper()}"
            if key in env:
                setattr(config, name, _parse_bool(key, env[key]))
        key = f"{_ENV_PREFIX}LOG_LEVEL"
        if env.get(key):
            config.log_level = _parse_log_level(key, env[key])
        return config
