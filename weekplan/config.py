"""
FILE: weekplan/config.py
PURPOSE: Settings loaded from environment variables
EXPORTS:
  - Settings (dataclass)
  - load_settings() -> Settings
DEPENDENCIES:
  - os, dataclasses, logging (stdlib)
  - weekplan.core.constants (DEFAULT_BUCKETS)
NOTES:
  - WEEKPLAN_BUCKETS: comma-separated bucket names (default Monday..Sunday)
  - WEEKPLAN_SEED: "demo" (default) or "empty"
  - WEEKPLAN_LOG_LEVEL: console log level name (default WARNING)
  - WEEKPLAN_LOG_FILE: optional path for a full debug log
  - Invalid values fall back to defaults instead of failing at startup
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from .core.constants import DEFAULT_BUCKETS
from .core.seed import SEED_CHOICES, SEED_DEMO

ENV_PREFIX = "WEEKPLAN"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env_list(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return tuple(default)
    parts = [p.strip() for p in raw.split(",") if p.strip()]
    # Duplicate names would break the store; keep first occurrence
    return tuple(dict.fromkeys(parts)) or tuple(default)


def _env_choice(name: str, choices: Tuple[str, ...], default: str) -> str:
    raw = (os.getenv(name) or "").strip().lower()
    return raw if raw in choices else default


def _env_level(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip().upper()
    level = logging.getLevelName(raw) if raw else default
    return level if isinstance(level, int) else default


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True)
class Settings:
    buckets: Tuple[str, ...] = DEFAULT_BUCKETS
    seed: str = SEED_DEMO
    log_level: int = logging.WARNING
    log_file: Optional[Path] = None


def load_settings() -> Settings:
    """Read settings from the environment."""
    return Settings(
        buckets=_env_list(_k("BUCKETS"), DEFAULT_BUCKETS),
        seed=_env_choice(_k("SEED"), SEED_CHOICES, SEED_DEMO),
        log_level=_env_level(_k("LOG_LEVEL"), logging.WARNING),
        log_file=_env_path(_k("LOG_FILE")),
    )
