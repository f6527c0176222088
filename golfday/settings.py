import logging
import os
from dataclasses import dataclass

from golfday.scorecard import MAX_STROKES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    scoring_pin: str
    golf_api_key: str
    max_strokes_per_hole: int
    log_level: str


def _int_from_env(key: str, default: int) -> int:
    value = os.getenv(key)
    if not value:
        return default
    try:
        parsed = int(value)
    except ValueError:
        logger.warning("Ignoring %s=%s (not an integer)", key, value)
        return default
    if parsed < 1:
        logger.warning("Ignoring %s=%s (must be positive)", key, value)
        return default
    return parsed


def load_settings() -> Settings:
    return Settings(
        scoring_pin=os.getenv("SCORING_PIN", "1234"),
        golf_api_key=os.getenv("GOLF_API_KEY", ""),
        max_strokes_per_hole=_int_from_env("MAX_STROKES_PER_HOLE", MAX_STROKES),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
