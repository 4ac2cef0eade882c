"""Climatological exceedance odds for a day of year."""

from __future__ import annotations

import statistics
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from geopulse.models.odds import (
    OddsCategory,
    OddsReport,
    OddsResult,
    ThresholdSet,
    WeatherSummary,
)
from geopulse.models.power import ClimateSeries, DailyRecord


def day_of_year(day: date) -> int:
    """Ordinal day in the Gregorian year, 1-366."""
    return day.timetuple().tm_yday


def matching_records(series: ClimateSeries, target: date) -> list[DailyRecord]:
    """Records whose day of year equals the target's, across all years.

    Days without a max temperature reading contribute nothing.
    """
    target_doy = day_of_year(target)
    return [
        series.record(day)
        for day in series.max_temperature
        if day_of_year(day) == target_doy
    ]


def exceedance_percent(count: int, n: int) -> float:
    """100 * count / n, with n floored at 1 and the result clamped to [0, 100]."""
    pct = count / max(n, 1) * 100.0
    return min(max(pct, 0.0), 100.0)


@dataclass(frozen=True)
class _Metric:
    category: OddsCategory
    threshold_field: str
    label: str
    note: str
    exceeds: Callable[[DailyRecord, float], bool]


def _hot(r: DailyRecord, t: float) -> bool:
    return r.max_temp_c is not None and r.max_temp_c > t


def _cold(r: DailyRecord, t: float) -> bool:
    return r.min_temp_c is not None and r.min_temp_c < t


def _rain(r: DailyRecord, t: float) -> bool:
    return r.precip_mm >= t


def _wind(r: DailyRecord, t: float) -> bool:
    return r.wind_kph >= t


# Evaluation order is part of the output contract.
_METRICS: tuple[_Metric, ...] = (
    _Metric(
        OddsCategory.HOT, "max_hot", "Too hot > {t} °C",
        "Historical odds of hotter-than-threshold.", _hot,
    ),
    _Metric(
        OddsCategory.COLD, "min_cold", "Too cold < {t} °C",
        "Historical odds of colder-than-threshold.", _cold,
    ),
    _Metric(
        OddsCategory.RAIN, "max_rain", "Rain ≥ {t} mm",
        "Daily precipitation exceedance odds.", _rain,
    ),
    _Metric(
        OddsCategory.WIND, "max_wind", "Wind ≥ {t} km/h",
        "Daily wind exceedance odds.", _wind,
    ),
)


def summarize(records: list[DailyRecord]) -> WeatherSummary | None:
    """Mean high, low, precipitation and wind, or None for no records."""
    if not records:
        return None
    highs = [r.max_temp_c for r in records if r.max_temp_c is not None]
    lows = [r.min_temp_c for r in records if r.min_temp_c is not None]
    return WeatherSummary(
        avg_high_c=statistics.mean(highs),
        avg_low_c=statistics.mean(lows),
        avg_precip_mm=statistics.mean(r.precip_mm for r in records),
        avg_wind_kph=statistics.mean(r.wind_kph for r in records),
    )


def compute_odds(
    series: ClimateSeries,
    target_date: date,
    thresholds: ThresholdSet,
) -> OddsReport:
    """Exceedance odds for each requested threshold on ``target_date``'s day of year.

    Results follow the order hot, cold, rain, wind, skipping thresholds that
    are None. With no matching days every percentage is 0 and the summary
    is None.
    """
    records = matching_records(series, target_date)
    n = len(records)

    results: list[OddsResult] = []
    for metric in _METRICS:
        threshold = getattr(thresholds, metric.threshold_field)
        if threshold is None:
            continue
        count = sum(1 for r in records if metric.exceeds(r, threshold))
        results.append(
            OddsResult(
                label=metric.label.format(t=int(threshold)),
                value_percent=exceedance_percent(count, n),
                note=metric.note,
                category=metric.category,
            )
        )

    return OddsReport(results=results, summary=summarize(records), sample_size=n)
