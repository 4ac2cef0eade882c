"""Public client classes for historical climate odds."""

from __future__ import annotations

import asyncio
from datetime import date
from typing import Any

from pydantic import ValidationError

from geopulse import config
from geopulse._http import AsyncTransport, SyncTransport
from geopulse._logging import log_api_call, log_service_call
from geopulse._params import daily_point_params
from geopulse.cache import CacheKey, SeriesCache
from geopulse.calculator import compute_odds
from geopulse.exceptions import ProviderValidationError
from geopulse.models.coordinate import GeoCoordinate
from geopulse.models.odds import OddsReport, ThresholdSet
from geopulse.models.power import ClimateSeries, PowerDailyResponse


def _parse_series(data: Any) -> ClimateSeries:
    """Validate a raw provider payload and decode it into a series."""
    try:
        response = PowerDailyResponse.model_validate(data)
    except ValidationError as exc:
        raise ProviderValidationError(
            f"Failed to validate daily point response: {exc}"
        ) from exc
    return ClimateSeries.from_response(response)


class ClimateClient:
    """Synchronous client for NASA POWER daily history and exceedance odds.

    Each distinct coordinate (rounded to 4 decimals) is fetched at most once
    per cache; pass a shared ``SeriesCache`` to reuse entries across clients.

    Usage:
        with ClimateClient() as client:
            report = client.odds(
                GeoCoordinate(latitude=25.2048, longitude=55.2708),
                date(2025, 7, 14),
                ThresholdSet(max_hot=40, max_wind=30),
            )
    """

    def __init__(
        self,
        base_url: str = config.POWER_BASE_URL,
        user_agent: str = config.USER_AGENT,
        cache: SeriesCache | None = None,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, user_agent=user_agent)
        self._cache = cache if cache is not None else SeriesCache()

    def __enter__(self) -> ClimateClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    @property
    def cache(self) -> SeriesCache:
        return self._cache

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @log_api_call
    def _download(self, coordinate: GeoCoordinate) -> ClimateSeries:
        params = daily_point_params(coordinate.latitude, coordinate.longitude)
        data = self._transport.get(config.DAILY_POINT_ENDPOINT, params)
        return _parse_series(data)

    def fetch(self, coordinate: GeoCoordinate) -> ClimateSeries:
        """Return the 1981-2020 daily series for ``coordinate``.

        Raises:
            NetworkError: the provider could not be reached in time.
            ProviderError: non-2xx status or a payload of the wrong shape.
        """
        key = SeriesCache.key_for(coordinate)
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        return self._cache.put(key, self._download(coordinate))

    @log_service_call
    def odds(
        self,
        coordinate: GeoCoordinate,
        target_date: date,
        thresholds: ThresholdSet | None = None,
    ) -> OddsReport:
        """Fetch (or reuse) the series and compute odds for ``target_date``."""
        series = self.fetch(coordinate)
        return compute_odds(series, target_date, thresholds or ThresholdSet())


class AsyncClimateClient:
    """Asynchronous client for NASA POWER daily history and exceedance odds.

    Concurrent fetches of the same uncached coordinate share one request.

    Usage:
        async with AsyncClimateClient() as client:
            series = await client.fetch(GeoCoordinate(latitude=48.85, longitude=2.35))
    """

    def __init__(
        self,
        base_url: str = config.POWER_BASE_URL,
        user_agent: str = config.USER_AGENT,
        cache: SeriesCache | None = None,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, user_agent=user_agent)
        self._cache = cache if cache is not None else SeriesCache()
        self._key_locks: dict[CacheKey, asyncio.Lock] = {}

    async def __aenter__(self) -> AsyncClimateClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    @property
    def cache(self) -> SeriesCache:
        return self._cache

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    @log_api_call
    async def _download(self, coordinate: GeoCoordinate) -> ClimateSeries:
        params = daily_point_params(coordinate.latitude, coordinate.longitude)
        data = await self._transport.get(config.DAILY_POINT_ENDPOINT, params)
        return _parse_series(data)

    async def fetch(self, coordinate: GeoCoordinate) -> ClimateSeries:
        """Return the 1981-2020 daily series for ``coordinate``."""
        key = SeriesCache.key_for(coordinate)
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        lock = self._key_locks.get(key)
        if lock is None:
            lock = self._key_locks[key] = asyncio.Lock()
        async with lock:
            # Another task may have filled the entry while we waited.
            cached = self._cache.get(key)
            if cached is not None:
                return cached
            series = self._cache.put(key, await self._download(coordinate))
        self._key_locks.pop(key, None)
        return series

    @log_service_call
    async def odds(
        self,
        coordinate: GeoCoordinate,
        target_date: date,
        thresholds: ThresholdSet | None = None,
    ) -> OddsReport:
        """Fetch (or reuse) the series and compute odds for ``target_date``."""
        series = await self.fetch(coordinate)
        return compute_odds(series, target_date, thresholds or ThresholdSet())
