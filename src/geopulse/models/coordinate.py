"""Geographic coordinate model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from geopulse import config


class GeoCoordinate(BaseModel):
    """Latitude/longitude in degrees. Range is not validated."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float

    @property
    def cache_key(self) -> tuple[float, float]:
        """Coordinate rounded to ~11 m, used as the series cache key."""
        return (
            round(self.latitude, config.COORDINATE_PRECISION),
            round(self.longitude, config.COORDINATE_PRECISION),
        )
