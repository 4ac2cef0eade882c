"""NASA POWER daily point response and the decoded climate series."""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from geopulse import config


def parse_date_key(value: Any) -> date:
    """Decode a provider ``YYYYMMDD`` key into a date."""
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or len(value) != 8 or not value.isdigit():
        raise ValueError(f"expected an eight-digit YYYYMMDD date key, got {value!r}")
    return datetime.strptime(value, "%Y%m%d").date()


DateKey = Annotated[date, BeforeValidator(parse_date_key)]


class PowerParameters(BaseModel):
    """Per-parameter readings keyed by day. Any parameter may be missing."""

    model_config = ConfigDict(frozen=True)

    max_temperature: dict[DateKey, float] | None = Field(default=None, alias="T2M_MAX")
    min_temperature: dict[DateKey, float] | None = Field(default=None, alias="T2M_MIN")
    precipitation: dict[DateKey, float] | None = Field(default=None, alias="PRECTOTCORR")
    wind_speed: dict[DateKey, float] | None = Field(default=None, alias="WS10M")


class PowerProperties(BaseModel):
    model_config = ConfigDict(frozen=True)

    parameter: PowerParameters


class PowerDailyResponse(BaseModel):
    """Top-level shape of the daily point endpoint (only what we read)."""

    model_config = ConfigDict(frozen=True)

    properties: PowerProperties


class DailyRecord(BaseModel):
    """One day of history at one location, with fallbacks applied."""

    model_config = ConfigDict(frozen=True)

    day: date
    max_temp_c: float | None = None
    min_temp_c: float | None = None
    precip_mm: float = 0.0
    wind_kph: float = 0.0


class ClimateSeries(BaseModel):
    """Decoded 1981-2020 daily history for one coordinate.

    Wind speed is kept in the provider's m/s here and converted to km/h
    when a ``DailyRecord`` is built.
    """

    model_config = ConfigDict(frozen=True)

    max_temperature: dict[date, float] = Field(default_factory=dict)
    min_temperature: dict[date, float] = Field(default_factory=dict)
    precipitation: dict[date, float] = Field(default_factory=dict)
    wind_speed: dict[date, float] = Field(default_factory=dict)

    @classmethod
    def from_response(cls, response: PowerDailyResponse) -> ClimateSeries:
        """Build a series, treating a missing parameter as an empty mapping."""
        p = response.properties.parameter
        return cls(
            max_temperature=p.max_temperature or {},
            min_temperature=p.min_temperature or {},
            precipitation=p.precipitation or {},
            wind_speed=p.wind_speed or {},
        )

    def record(self, day: date) -> DailyRecord:
        """Build the record for ``day``.

        Min temperature falls back to max temperature, precipitation and
        wind fall back to 0.
        """
        tmax = self.max_temperature.get(day)
        tmin = self.min_temperature.get(day, tmax)
        wind_ms = self.wind_speed.get(day)
        return DailyRecord(
            day=day,
            max_temp_c=tmax,
            min_temp_c=tmin,
            precip_mm=self.precipitation.get(day, 0.0),
            wind_kph=wind_ms * config.MS_TO_KMH if wind_ms is not None else 0.0,
        )
