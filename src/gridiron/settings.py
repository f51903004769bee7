"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


logger = logging.getLogger(__name__)

_BREAKOUT_LIMIT_ENV = "GRIDIRON_BREAKOUT_LIMIT"
_DEFAULT_WEEK_ENV = "GRIDIRON_DEFAULT_WEEK"
_LOG_LEVEL_ENV = "GRIDIRON_LOG_LEVEL"

_BREAKOUT_LIMIT_DEFAULT = 10
_DEFAULT_WEEK_DEFAULT = 1
_LOG_LEVEL_DEFAULT = "WARNING"
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _env_int(
    name: str,
    default: int,
    *,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    if max_value is not None:
        value = min(max_value, value)
    return value


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    level = raw.strip().upper()
    if level not in _LOG_LEVELS:
        logger.warning("Invalid log level for %s: %s; using default %s", name, raw, default)
        return default
    return level


@dataclass(frozen=True)
class EngineSettings:
    breakout_limit: int = _BREAKOUT_LIMIT_DEFAULT
    default_week: int = _DEFAULT_WEEK_DEFAULT
    log_level: str = _LOG_LEVEL_DEFAULT

    @classmethod
    def from_env(cls) -> "EngineSettings":
        return cls(
            breakout_limit=_env_int(_BREAKOUT_LIMIT_ENV, _BREAKOUT_LIMIT_DEFAULT, min_value=1),
            default_week=_env_int(
                _DEFAULT_WEEK_ENV, _DEFAULT_WEEK_DEFAULT, min_value=1, max_value=18
            ),
            log_level=_env_log_level(_LOG_LEVEL_ENV, _LOG_LEVEL_DEFAULT),
        )
