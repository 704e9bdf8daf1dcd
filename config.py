# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Centralized configuration for environment variables."""

import logging
import os
from pathlib import Path

from matchup_model import ModelCoefficients
from pitching import HARD_PITCH_LIMIT

SEED_ENV = "SIM_SEED"
LOG_LEVEL_ENV = "SIM_LOG_LEVEL"
COEFFICIENTS_ENV = "SIM_MODEL_COEFFICIENTS"
HARD_PITCH_LIMIT_ENV = "SIM_HARD_PITCH_LIMIT"
SEASON_PATH_ENV = "SIM_SEASON_PATH"

DEFAULT_SEASON_PATH = Path(__file__).resolve().parent / "data" / "sample_season.json"


def _int_env(name: str) -> int | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def get_seed() -> int | None:
    """Return the simulation seed, or None to pick one at random."""
    return _int_env(SEED_ENV)


def get_log_level() -> int:
    """Return the configured logging level (default WARNING)."""
    name = os.environ.get(LOG_LEVEL_ENV, "WARNING").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"{LOG_LEVEL_ENV} is not a logging level: {name!r}")
    return level


def get_model_coefficients() -> ModelCoefficients:
    """Parse ``SIM_MODEL_COEFFICIENTS`` as ``"batter,pitcher,league"``."""
    raw = os.environ.get(COEFFICIENTS_ENV, "").strip()
    if not raw:
        return ModelCoefficients()
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != 3:
        raise ValueError(f"{COEFFICIENTS_ENV} needs three comma-separated numbers, got {raw!r}")
    try:
        batter, pitcher, league = (float(p) for p in parts)
    except ValueError:
        raise ValueError(f"{COEFFICIENTS_ENV} needs three comma-separated numbers, got {raw!r}") from None
    return ModelCoefficients(batter=batter, pitcher=pitcher, league=league)


def get_hard_pitch_limit() -> int:
    limit = _int_env(HARD_PITCH_LIMIT_ENV)
    if limit is None:
        return HARD_PITCH_LIMIT
    if limit <= 0:
        raise ValueError(f"{HARD_PITCH_LIMIT_ENV} must be positive, got {limit}")
    return limit


def get_season_path() -> Path:
    raw = os.environ.get(SEASON_PATH_ENV, "").strip()
    return Path(raw) if raw else DEFAULT_SEASON_PATH


def configure_logging(level: int | None = None) -> None:
    """Set up root logging for command-line entry points."""
    logging.basicConfig(
        level=level if level is not None else get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
