"""GeoPulse data models."""

from geopulse.models.coordinate import GeoCoordinate
from geopulse.models.odds import (
    OddsCategory,
    OddsReport,
    OddsResult,
    ThresholdSet,
    WeatherSummary,
)
from geopulse.models.power import (
    ClimateSeries,
    DailyRecord,
    PowerDailyResponse,
    PowerParameters,
    PowerProperties,
)
from geopulse.models.preset import PRESETS, ComfortPreset, get_preset, resolve_thresholds

__all__ = [
    "PRESETS",
    "ClimateSeries",
    "ComfortPreset",
    "DailyRecord",
    "GeoCoordinate",
    "OddsCategory",
    "OddsReport",
    "OddsResult",
    "PowerDailyResponse",
    "PowerParameters",
    "PowerProperties",
    "ThresholdSet",
    "WeatherSummary",
    "get_preset",
    "resolve_thresholds",
]
