"""Threshold, odds result and summary models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class OddsCategory(str, Enum):
    """Metric a result describes, in evaluation order."""

    HOT = "hot"
    COLD = "cold"
    RAIN = "rain"
    WIND = "wind"

    @property
    def icon(self) -> str:
        """SF Symbol name used by the GeoPulse app for this category."""
        return _ICONS[self]


_ICONS: dict[OddsCategory, str] = {
    OddsCategory.HOT: "thermometer.sun",
    OddsCategory.COLD: "thermometer.snowflake",
    OddsCategory.RAIN: "cloud.rain",
    OddsCategory.WIND: "wind",
}


class ThresholdSet(BaseModel):
    """Up to four thresholds. ``None`` means the metric is not requested."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    max_hot: float | None = None  # °C, too hot if tmax > this
    min_cold: float | None = None  # °C, too cold if tmin < this
    max_rain: float | None = None  # mm, rainy if precip >= this
    max_wind: float | None = None  # km/h, windy if wind >= this


class OddsResult(BaseModel):
    """Exceedance odds for one threshold."""

    model_config = ConfigDict(frozen=True)

    label: str
    value_percent: float = Field(ge=0.0, le=100.0, serialization_alias="valuePercent")
    note: str
    category: OddsCategory

    @property
    def icon(self) -> str:
        return self.category.icon


class WeatherSummary(BaseModel):
    """Mean conditions over the matching historical days."""

    model_config = ConfigDict(frozen=True)

    avg_high_c: float = Field(serialization_alias="avgHighC")
    avg_low_c: float = Field(serialization_alias="avgLowC")
    avg_precip_mm: float = Field(serialization_alias="avgPrecipMM")
    avg_wind_kph: float = Field(serialization_alias="avgWindKPH")


class OddsReport(BaseModel):
    """Calculator output: ordered results plus an optional summary."""

    model_config = ConfigDict(frozen=True)

    results: list[OddsResult] = Field(default_factory=list)
    summary: WeatherSummary | None = None
    sample_size: int = Field(default=0, ge=0)
