"""In-memory climate series cache keyed by rounded coordinate."""

from __future__ import annotations

import logging
import threading

from geopulse.models.coordinate import GeoCoordinate
from geopulse.models.power import ClimateSeries

logger = logging.getLogger("geopulse.cache")

CacheKey = tuple[float, float]


class SeriesCache:
    """Write-once-per-key store of fetched series.

    Entries are never updated or evicted; the underlying history is static,
    so an entry is valid for as long as the cache object lives.
    """

    def __init__(self) -> None:
        self._entries: dict[CacheKey, ClimateSeries] = {}
        self._lock = threading.Lock()

    @staticmethod
    def key_for(coordinate: GeoCoordinate) -> CacheKey:
        return coordinate.cache_key

    def get(self, key: CacheKey) -> ClimateSeries | None:
        series = self._entries.get(key)
        logger.debug("cache %s for %s", "hit" if series is not None else "miss", key)
        return series

    def put(self, key: CacheKey, series: ClimateSeries) -> ClimateSeries:
        """Store ``series`` unless ``key`` is already present.

        Returns the stored entry, which is the earlier one if a concurrent
        fetch got there first.
        """
        with self._lock:
            stored = self._entries.setdefault(key, series)
        if stored is not series:
            logger.debug("cache already populated for %s, keeping first entry", key)
        return stored

    def __len__(self) -> int:
        return len(self._entries)
