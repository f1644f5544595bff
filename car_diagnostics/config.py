"""
Runtime settings for the car diagnostics tool.

Values come from environment variables, after loading a .env file from the
working directory when one exists. The rule set itself is fixed and is not
configurable here.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from .xml_loader import sample_car_path

load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    val = os.getenv(name)
    if val is None or val == "":
        return default
    return val


# Document diagnosed when the CLI is given no path
SAMPLE_CAR_PATH: Path = Path(_env("CAR_DIAGNOSTICS_SAMPLE_PATH", "") or sample_car_path())

DEBUG: bool = (_env("CAR_DIAGNOSTICS_DEBUG", "false") or "false").lower() == "true"
LOG_LEVEL: str = (_env("CAR_DIAGNOSTICS_LOG_LEVEL", "WARNING") or "WARNING").upper()
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def log_level() -> int:
    """Resolve the configured level name; unknown names fall back to WARNING."""
    if DEBUG:
        return logging.DEBUG
    level = logging.getLevelName(LOG_LEVEL)
    return level if isinstance(level, int) else logging.WARNING
