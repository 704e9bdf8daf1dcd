# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Load and save season packages as JSON.

A season package holds league rates, team ids, batter and pitcher rate
splits and pitcher usage for one year. The bundled
``data/sample_season.json`` is a small two-team package used by the
command-line demo and the tests.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from models import SeasonPackage

logger = logging.getLogger(__name__)

SAMPLE_SEASON_PATH = Path(__file__).resolve().parent / "sample_season.json"


def load_season(path: str | Path | None = None) -> SeasonPackage:
    """Read and validate a season package.

    Raises:
        FileNotFoundError: If *path* does not exist.
        pydantic.ValidationError: If the file does not match the schema.
    """
    p = Path(path) if path is not None else SAMPLE_SEASON_PATH
    with open(p) as f:
        raw = json.load(f)
    season = SeasonPackage.model_validate(raw)
    logger.info(
        "Loaded %d season from %s: %d teams, %d batters, %d pitchers",
        season.meta.year, p, len(season.teams), len(season.batters), len(season.pitchers),
    )
    return season


def save_season(season: SeasonPackage, path: str | Path) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w") as f:
        json.dump(season.model_dump(mode="json"), f, indent=2)
    return p
