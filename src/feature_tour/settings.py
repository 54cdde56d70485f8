"""Environment-driven settings for the tour driver."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from .exceptions import ConfigurationError

LOG_LEVEL_ENV = "FEATURE_TOUR_LOG_LEVEL"
ASYNC_DELAY_ENV = "FEATURE_TOUR_ASYNC_DELAY"
NO_COLOR_ENV = "NO_COLOR"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_ASYNC_DELAY = 1.0


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.WARNING
    async_delay: float = DEFAULT_ASYNC_DELAY
    no_color: bool = False


def _parse_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level '{value}' in {LOG_LEVEL_ENV}.")
    return level


def _parse_delay(value: str) -> float:
    try:
        delay = float(value)
    except ValueError:
        raise ConfigurationError(
            f"{ASYNC_DELAY_ENV} must be a number of seconds, got '{value}'."
        ) from None
    if delay < 0:
        raise ConfigurationError(f"{ASYNC_DELAY_ENV} must not be negative.")
    return delay


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read :class:`Settings` from ``environ`` (defaults to ``os.environ``).

    Unset variables fall back to the defaults; malformed ones raise
    :class:`ConfigurationError`.
    """

    env = os.environ if environ is None else environ
    return Settings(
        log_level=_parse_level(env.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)),
        async_delay=_parse_delay(env.get(ASYNC_DELAY_ENV, str(DEFAULT_ASYNC_DELAY))),
        no_color=bool(env.get(NO_COLOR_ENV)),
    )
