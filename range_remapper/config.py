"""Configuration constants and .env loading.

WHY: Centralizes the defaults the CLI falls back on (log level, seed
mode, target category, output format) so they are easy to find and to
override per machine without touching code.

HOW: python-dotenv loads the .env file on import. Defaults are read from
environment variables into module-level constants. load_log_level() and
load_seed_mode() validate the raw strings and fail with a clear message.

RULES:
- Every default can be overridden with a RANGE_REMAPPER_* variable
- An empty RANGE_REMAPPER_TARGET means "last category of the chain"
- Invalid values raise ValueError; they are never silently replaced
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

from range_remapper.core.report import SEED_MODES

# Load .env from the working directory
load_dotenv()

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_LOG_LEVEL = os.getenv("RANGE_REMAPPER_LOG_LEVEL", "WARNING")
DEFAULT_SEED_MODE = os.getenv("RANGE_REMAPPER_SEED_MODE", "values")
DEFAULT_TARGET_CATEGORY = os.getenv("RANGE_REMAPPER_TARGET", "").strip()
DEFAULT_FORMAT = os.getenv("RANGE_REMAPPER_FORMAT", "plain_text")

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def load_log_level(name: str | None = None) -> int:
    """Resolve a logging level name (default: DEFAULT_LOG_LEVEL).

    RULES:
    - Case-insensitive standard level names (DEBUG, INFO, WARNING, ...)
    - Raises ValueError for anything else
    """
    raw = (name if name is not None else DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise ValueError(
            "Unknown log level '{}'. Use DEBUG, INFO, WARNING, ERROR or CRITICAL.".format(raw)
        )
    return level


def load_seed_mode(mode: str | None = None) -> str:
    """Resolve a seed mode (default: DEFAULT_SEED_MODE).

    Raises:
        ValueError: If the mode is not one of SEED_MODES.
    """
    raw = (mode if mode is not None else DEFAULT_SEED_MODE).strip().lower()
    if raw not in SEED_MODES:
        raise ValueError(
            "Unknown seed mode '{}'. Available: {}".format(raw, ", ".join(SEED_MODES))
        )
    return raw
