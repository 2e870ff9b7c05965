"""
Runtime settings for the CLI and HTTP API, read from the environment.

The conversion functions themselves take no configuration; these knobs only
shape the outer surfaces. A `.env` file in the working directory is loaded
first, so settings can live there during development.

    NUM2ENGLISH_LOG_LEVEL         CLI log level (default WARNING)
    NUM2ENGLISH_MAX_INPUT_LENGTH  Longest value the API accepts (default 1000)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAX_INPUT_LENGTH = 1000


@dataclass(frozen=True)
class Settings:
    """Resolved environment settings."""

    log_level: str = DEFAULT_LOG_LEVEL
    max_input_length: int = DEFAULT_MAX_INPUT_LENGTH


def load_settings() -> Settings:
    """Load `.env` (if present) and read settings from the environment."""
    load_dotenv()

    log_level = os.environ.get("NUM2ENGLISH_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        logger.warning("Unknown NUM2ENGLISH_LOG_LEVEL %r, using %s", log_level, DEFAULT_LOG_LEVEL)
        log_level = DEFAULT_LOG_LEVEL

    raw_length = os.environ.get("NUM2ENGLISH_MAX_INPUT_LENGTH", str(DEFAULT_MAX_INPUT_LENGTH))
    try:
        max_input_length = int(raw_length)
    except ValueError:
        logger.warning(
            "NUM2ENGLISH_MAX_INPUT_LENGTH must be an integer, got %r, using %d",
            raw_length,
            DEFAULT_MAX_INPUT_LENGTH,
        )
        max_input_length = DEFAULT_MAX_INPUT_LENGTH

    return Settings(log_level=log_level, max_input_length=max_input_length)
