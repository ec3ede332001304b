"""Runtime configuration helpers for session defaults."""
from __future__ import annotations

import logging
import os
from typing import Dict, Final, Tuple

from .models import SessionConfig


logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    pass


# Bounds of the settings sliders shown between rounds.
RANGES: Final[Dict[str, Tuple[int, int]]] = {
    "board_size": (5, 10),
    "n_white_stones": (1, 10),
    "n_black_stones": (1, 10),
    "time_seconds": (1, 120),
}


def clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))


def clamp_field(field: str, value: int) -> int:
    """Clamp ``value`` into the slider range of ``field``."""
    try:
        lo, hi = RANGES[field]
    except KeyError:
        raise ValueError(f"Unknown config field: {field}") from None
    return clamp(int(value), lo, hi)


def env_int(name: str, default: int, lo: int, hi: int, *, strict: bool = False) -> int:
    """Return an integer setting from environment variables.

    Values outside ``[lo, hi]`` are clamped into range.  If the variable is
    unset the ``default`` is used.  Values that do not parse as integers are
    logged and replaced by ``default``, or raise :class:`ConfigError` when
    ``strict`` is set.
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value.strip())
    except ValueError:
        if strict:
            raise ConfigError(f"{name} must be an integer, got {value!r}") from None
        logger.warning("Ignoring non-integer %s=%r, using %s", name, value, default)
        return default
    return clamp(parsed, lo, hi)


ENV_NAMES: Final[Dict[str, str]] = {
    "board_size": "SETON_BOARD_SIZE",
    "n_black_stones": "SETON_BLACK_STONES",
    "n_white_stones": "SETON_WHITE_STONES",
    "time_seconds": "SETON_TIME_SECONDS",
}


def default_config(*, strict: bool = False) -> SessionConfig:
    """Build the starting session config, honouring ``SETON_*`` overrides."""
    base = SessionConfig()
    values = {
        field: env_int(env_name, getattr(base, field), *RANGES[field], strict=strict)
        for field, env_name in ENV_NAMES.items()
    }
    return SessionConfig(**values)


__all__ = [
    "ConfigError",
    "ENV_NAMES",
    "RANGES",
    "clamp",
    "clamp_field",
    "default_config",
    "env_int",
]
