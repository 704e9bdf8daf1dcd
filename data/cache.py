# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Caller-owned cache for loaded season packages.

Parsing and validating a season file is the slowest part of starting a
game, so callers that simulate many games keep a :class:`SeasonCache`
around. There is no module-level instance: whoever creates the cache
owns it, and the clock used for expiry is injected.

Usage::

    from data.cache import SeasonCache

    cache = SeasonCache()                       # in-memory
    cache = SeasonCache("/tmp/seasons")         # JSON files on disk

    season = cache.load(1976, "data/seasons/1976.json")
    cache.get(1976)                             # hit until the TTL runs out
    cache.invalidate(1976)
    cache.clear()
"""

from __future__ import annotations

import json
import logging
import shutil
import time
from pathlib import Path
from typing import Any, Callable

from pydantic import ValidationError

from data.season import load_season
from models import SeasonPackage

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# TTL constants (seconds)
# ---------------------------------------------------------------------------

TTL_SEASON: int = 86_400 * 7      # season data does not change once loaded
TTL_DEFAULT: int = 86_400          # 24 hours


Clock = Callable[[], float]


# ---------------------------------------------------------------------------
# Cache class
# ---------------------------------------------------------------------------

class SeasonCache:
    """Season packages keyed by year, with per-entry TTL.

    Each entry is ``{"created": <timestamp>, "ttl": <seconds>, "data": <payload>}``
    and is considered expired when ``clock() - created > ttl``. With a
    *root_dir* entries are written as ``<root>/season/<year>.json``;
    without one they live in memory only.

    Args:
        root_dir: Directory for on-disk entries, or ``None`` for memory.
        clock: Returns the current time in seconds.
        ttl: Default time-to-live for new entries.
    """

    def __init__(
        self,
        root_dir: str | Path | None = None,
        clock: Clock = time.time,
        ttl: int = TTL_SEASON,
    ) -> None:
        self._root = Path(root_dir) if root_dir is not None else None
        self._clock = clock
        self._ttl = ttl
        self._memory: dict[int, dict[str, Any]] = {}

    # -- public API --------------------------------------------------------

    @property
    def root_dir(self) -> Path | None:
        return self._root

    def get(self, year: int) -> SeasonPackage | None:
        """Return the cached season, or ``None`` if missing or expired."""
        entry = self._read(year)
        if entry is None:
            return None
        if self._expired(entry):
            logger.debug("Season %d expired from cache", year)
            self.invalidate(year)
            return None
        try:
            return SeasonPackage.model_validate(entry.get("data"))
        except ValidationError:
            # Corrupted entry -- treat as cache miss and clean up.
            self.invalidate(year)
            return None

    def set(self, year: int, season: SeasonPackage, ttl: int | None = None) -> None:
        entry = {
            "created": self._clock(),
            "ttl": self._ttl if ttl is None else ttl,
            "data": season.model_dump(mode="json"),
        }
        if self._root is None:
            self._memory[year] = entry
            return
        path = self._path_for(year)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(".tmp")
        with open(tmp_path, "w") as f:
            json.dump(entry, f, separators=(",", ":"))
        tmp_path.replace(path)  # atomic rename

    def has(self, year: int) -> bool:
        entry = self._read(year)
        return entry is not None and not self._expired(entry)

    def invalidate(self, year: int) -> bool:
        """Remove one entry. Returns ``True`` if something was removed."""
        if self._root is None:
            return self._memory.pop(year, None) is not None
        path = self._path_for(year)
        if path.exists():
            path.unlink()
            return True
        return False

    def clear(self) -> int:
        """Drop every entry and return how many there were."""
        if self._root is None:
            count = len(self._memory)
            self._memory.clear()
            return count
        if not self._root.exists():
            return 0
        count = sum(1 for _ in self._root.rglob("*.json"))
        shutil.rmtree(self._root)
        return count

    def load(self, year: int, path: str | Path) -> SeasonPackage:
        """Return the cached season for *year*, loading *path* on a miss."""
        season = self.get(year)
        if season is not None:
            return season
        logger.debug("Season %d cache miss, loading %s", year, path)
        season = load_season(path)
        self.set(year, season)
        return season

    # -- helpers -----------------------------------------------------------

    def _expired(self, entry: dict[str, Any]) -> bool:
        created: float = entry.get("created", 0)
        ttl: float = entry.get("ttl", TTL_DEFAULT)
        return self._clock() - created > ttl

    def _read(self, year: int) -> dict[str, Any] | None:
        if self._root is None:
            return self._memory.get(year)
        path = self._path_for(year)
        if not path.exists():
            return None
        try:
            with open(path) as f:
                return json.load(f)
        except (json.JSONDecodeError, OSError):
            path.unlink(missing_ok=True)
            return None

    def _path_for(self, year: int) -> Path:
        return self._root / "season" / f"{year}.json"
