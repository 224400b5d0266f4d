"""Environment-driven settings for the command-line tool."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_PRECISION = 2


@dataclass
class Settings:
    """Runtime settings for the CLI."""

    log_level: str = DEFAULT_LOG_LEVEL
    precision: int = DEFAULT_PRECISION      # Decimal places for km output


def load_settings() -> Settings:
    """Read settings from ``COORD_DISTANCE_*`` environment variables."""
    log_level = os.environ.get("COORD_DISTANCE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        logger.warning(
            "COORD_DISTANCE_LOG_LEVEL=%r is not a logging level, using %s",
            log_level, DEFAULT_LOG_LEVEL,
        )
        log_level = DEFAULT_LOG_LEVEL

    raw_precision = os.environ.get("COORD_DISTANCE_PRECISION")
    precision = DEFAULT_PRECISION
    if raw_precision is not None:
        try:
            precision = int(raw_precision)
        except ValueError:
            logger.warning(
                "COORD_DISTANCE_PRECISION=%r is not an integer, using %d",
                raw_precision, DEFAULT_PRECISION,
            )
        else:
            if precision < 0:
                logger.warning(
                    "COORD_DISTANCE_PRECISION=%d is negative, using %d",
                    precision, DEFAULT_PRECISION,
                )
                precision = DEFAULT_PRECISION

    return Settings(log_level=log_level, precision=precision)
