"""Settings read from the environment."""

import os
from dataclasses import dataclass

from loguru import logger

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAX_CANDIDATES = 1 << 20
DEFAULT_FLAG_PREFIX = "-D"


@dataclass
class Settings:
    """Runtime settings for the command line interface.

    Attributes:
        log_level: Minimum level of log messages written to stderr
        max_candidates: Candidate limit for enumeration, None for no limit
        flag_prefix: Prefix used when rendering definitions as compiler flags
    """

    log_level: str = DEFAULT_LOG_LEVEL
    max_candidates: int | None = DEFAULT_MAX_CANDIDATES
    flag_prefix: str = DEFAULT_FLAG_PREFIX


def _read_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


def _read_log_level(name: str, default: str) -> str:
    level = os.environ.get(name, default).upper()
    try:
        logger.level(level)
    except ValueError:
        logger.warning(f"Ignoring unknown {name}={level!r}, using {default}")
        return default
    return level


def load_settings() -> Settings:
    """Load settings from ``SHADERPERM_*`` environment variables.

    ``SHADERPERM_MAX_CANDIDATES=0`` disables the candidate limit.
    """
    max_candidates = _read_int("SHADERPERM_MAX_CANDIDATES", DEFAULT_MAX_CANDIDATES)
    return Settings(
        log_level=_read_log_level("SHADERPERM_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        max_candidates=max_candidates if max_candidates > 0 else None,
        flag_prefix=os.environ.get("SHADERPERM_FLAG_PREFIX", DEFAULT_FLAG_PREFIX),
    )
