"""
config.py
=========
Central configuration module for Mansion Mystery.

All tunable constants (hash table size, verdict threshold, logging format)
live here so they can be adjusted without touching business logic.

Usage:
    from config import HASH_CONFIG, GAME_CONFIG, LOG_CONFIG

Environment overrides are read by load_config_from_env(), which the entry
points (cli.py, app.py) call after python-dotenv has loaded any .env file.
The core modules only ever see the frozen dataclasses below.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

logger = logging.getLogger("mansion_mystery.config")


# ---------------------------------------------------------------------------
# Hash index
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class HashConfig:
    """
    Sizing of the clue → suspect hash index.

    Attributes:
        bucket_count: Number of chains in the table. Bucket index is the sum
                      of the clue's character codes modulo this value.
    """
    bucket_count: int = 10


# ---------------------------------------------------------------------------
# Game balance
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GameConfig:
    """
    Game-balance settings.

    Attributes:
        verdict_threshold: Minimum number of collected clues that must point
                           at the accused for the accusation to succeed.
        start_room:        Name of the room the player starts in. Must match
                           the root of case_data.MANSION_LAYOUT.
    """
    verdict_threshold: int = 2
    start_room:        str = "Hall de Entrada"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LogConfig:
    """Arguments handed to logging.basicConfig() by the entry points."""
    level:   str = "INFO"
    format:  str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"


# ---------------------------------------------------------------------------
# Singleton instances (import-ready)
# ---------------------------------------------------------------------------

HASH_CONFIG = HashConfig()
GAME_CONFIG = GameConfig()
LOG_CONFIG  = LogConfig()


# ---------------------------------------------------------------------------
# Environment overrides
# ---------------------------------------------------------------------------

ENV_HASH_BUCKETS      = "MANSION_HASH_BUCKETS"
ENV_VERDICT_THRESHOLD = "MANSION_VERDICT_THRESHOLD"
ENV_LOG_LEVEL         = "MANSION_LOG_LEVEL"


def _read_positive_int(
    environ: Mapping[str, str], key: str, default: int
) -> int:
    raw = environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(
            "Ignoring %s=%r: not an integer. Using default %d.", key, raw, default
        )
        return default
    if value < 1:
        logger.warning(
            "Ignoring %s=%d: must be >= 1. Using default %d.", key, value, default
        )
        return default
    return value


def load_config_from_env(
    environ: Optional[Mapping[str, str]] = None,
) -> Tuple[HashConfig, GameConfig, LogConfig]:
    """
    Build config objects from environment variables, falling back to defaults.

    Recognised variables:
        MANSION_HASH_BUCKETS      → HashConfig.bucket_count
        MANSION_VERDICT_THRESHOLD → GameConfig.verdict_threshold
        MANSION_LOG_LEVEL         → LogConfig.level (e.g. "DEBUG")

    Malformed values are logged at WARNING and replaced by the default, so a
    typo in a .env file never prevents the game from starting.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        (HashConfig, GameConfig, LogConfig) tuple.
    """
    env = os.environ if environ is None else environ

    hash_cfg = HashConfig(
        bucket_count=_read_positive_int(
            env, ENV_HASH_BUCKETS, HASH_CONFIG.bucket_count
        ),
    )
    game_cfg = GameConfig(
        verdict_threshold=_read_positive_int(
            env, ENV_VERDICT_THRESHOLD, GAME_CONFIG.verdict_threshold
        ),
        start_room=GAME_CONFIG.start_room,
    )

    level = (env.get(ENV_LOG_LEVEL) or LOG_CONFIG.level).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning(
            "Ignoring %s=%r: unknown log level. Using %s.",
            ENV_LOG_LEVEL, level, LOG_CONFIG.level,
        )
        level = LOG_CONFIG.level
    log_cfg = LogConfig(level=level)

    return hash_cfg, game_cfg, log_cfg


def configure_logging(log_cfg: LogConfig = LOG_CONFIG) -> None:
    """
    Configure root logging for an entry point.

    Called exactly once by cli.py or app.py. All "mansion_mystery.*" loggers
    propagate to the handler installed here.
    """
    logging.basicConfig(
        level=log_cfg.level,
        format=log_cfg.format,
        datefmt=log_cfg.datefmt,
    )
