"""GeoPulse: historical weather odds from NASA POWER climatology."""

from geopulse.cache import SeriesCache
from geopulse.calculator import compute_odds, day_of_year
from geopulse.client import AsyncClimateClient, ClimateClient
from geopulse.exceptions import (
    GeoPulseError,
    NetworkError,
    NetworkTimeoutError,
    ProviderError,
    ProviderValidationError,
)
from geopulse.models import (
    PRESETS,
    ClimateSeries,
    ComfortPreset,
    DailyRecord,
    GeoCoordinate,
    OddsCategory,
    OddsReport,
    OddsResult,
    ThresholdSet,
    WeatherSummary,
    get_preset,
    resolve_thresholds,
)

__all__ = [
    "PRESETS",
    "AsyncClimateClient",
    "ClimateClient",
    "ClimateSeries",
    "ComfortPreset",
    "DailyRecord",
    "GeoCoordinate",
    "GeoPulseError",
    "NetworkError",
    "NetworkTimeoutError",
    "OddsCategory",
    "OddsReport",
    "OddsResult",
    "ProviderError",
    "ProviderValidationError",
    "SeriesCache",
    "ThresholdSet",
    "WeatherSummary",
    "compute_odds",
    "day_of_year",
    "get_preset",
    "resolve_thresholds",
]

__version__ = "0.1.0"
