"""Shareable snapshots of an odds report: JSON export, plain text and advice."""

from __future__ import annotations

import json
import math
from collections.abc import Sequence
from datetime import date, datetime, time, timezone
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from geopulse.models.coordinate import GeoCoordinate
from geopulse.models.odds import OddsCategory, OddsReport, OddsResult, ThresholdSet, WeatherSummary
from geopulse.models.preset import ComfortPreset

APP_NAME = "GeoPulse"
EXPORT_NOTE = (
    "This is a probability snapshot from historical NASA data (climatology), not a forecast."
)
SHARE_NOTE = "Note: This is a probability snapshot from historical NASA data, not a forecast."
NO_RESULTS_ADVICE = "No data to summarize yet."

_ADVICE: dict[OddsCategory, str] = {
    OddsCategory.HOT: (
        "Heat is your biggest risk on this date. Consider earlier start times or shaded venues."
    ),
    OddsCategory.RAIN: "Rain is the main concern. Have a backup canopy or venue.",
    OddsCategory.WIND: "Wind could be disruptive. Secure decor and avoid tall umbrellas.",
    OddsCategory.COLD: "Cold is the main discomfort. Plan for layers and warm drinks.",
}


class ExportResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    value_percent: float = Field(serialization_alias="valuePercent")
    note: str
    system_icon: str = Field(serialization_alias="systemIcon")


class ExportDocument(BaseModel):
    """Everything needed to reproduce a query and its answer."""

    model_config = ConfigDict(frozen=True)

    app_name: str = Field(default=APP_NAME, serialization_alias="appName")
    generated_at: datetime = Field(serialization_alias="generatedAt")
    location_name: str | None = Field(default=None, serialization_alias="locationName")
    coordinate: GeoCoordinate | None = None
    target_date: datetime = Field(serialization_alias="date")
    preset_name: str | None = Field(default=None, serialization_alias="presetName")
    custom_max_hot: float | None = Field(default=None, serialization_alias="customMaxHot")
    custom_min_cold: float | None = Field(default=None, serialization_alias="customMinCold")
    custom_max_rain: float | None = Field(default=None, serialization_alias="customMaxRain")
    custom_max_wind: float | None = Field(default=None, serialization_alias="customMaxWind")
    results: list[ExportResult] = Field(default_factory=list)
    weather_summary: WeatherSummary | None = Field(default=None, serialization_alias="weatherSummary")
    note: str = EXPORT_NOTE

    def to_json(self) -> str:
        """Pretty JSON with sorted keys, ISO-8601 dates and absent fields omitted."""
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        return json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False)


def build_export(
    report: OddsReport,
    target_date: date,
    *,
    coordinate: GeoCoordinate | None = None,
    location_name: str | None = None,
    preset: ComfortPreset | None = None,
    custom: ThresholdSet | None = None,
    generated_at: datetime | None = None,
) -> ExportDocument:
    custom = custom or ThresholdSet()
    return ExportDocument(
        generated_at=generated_at or datetime.now(timezone.utc),
        location_name=location_name,
        coordinate=coordinate,
        target_date=datetime.combine(target_date, time.min, tzinfo=timezone.utc),
        preset_name=preset.name if preset is not None else None,
        custom_max_hot=custom.max_hot,
        custom_min_cold=custom.min_cold,
        custom_max_rain=custom.max_rain,
        custom_max_wind=custom.max_wind,
        results=[
            ExportResult(
                label=r.label, value_percent=r.value_percent, note=r.note, system_icon=r.icon,
            )
            for r in report.results
        ],
        weather_summary=report.summary,
    )


def export_filename(target_date: date) -> str:
    return f"{APP_NAME}-Results-{target_date:%Y-%m-%d}.json"


def write_export(document: ExportDocument, directory: str | Path) -> Path:
    """Write ``document`` into ``directory`` and return the file path."""
    path = Path(directory) / export_filename(document.target_date.date())
    path.write_text(document.to_json(), encoding="utf-8")
    return path


def _full_date(day: date) -> str:
    return f"{day:%A, %B} {day.day}, {day.year}"


def share_text(
    results: Sequence[OddsResult],
    target_date: date,
    location_name: str | None = None,
) -> str:
    """Plain-text snapshot suitable for a share sheet or chat message."""
    lines = "\n".join(f"• {r.label}: {int(r.value_percent)}%" for r in results)
    return (
        f"{APP_NAME} — Weather Odds\n"
        f"Location: {location_name or 'Selected Location'}\n"
        f"Date: {_full_date(target_date)}\n"
        "\n"
        f"{lines}\n"
        "\n"
        f"{SHARE_NOTE}"
    )


def risk_advice(results: Sequence[OddsResult]) -> str:
    """One sentence about the highest-odds risk."""
    if not results:
        return NO_RESULTS_ADVICE
    # max() keeps the first of equal values, so ties go to evaluation order
    top = max(results, key=lambda r: r.value_percent)
    return _ADVICE[top.category]


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def format_summary(summary: WeatherSummary) -> list[str]:
    """Display lines for the averaged conditions."""
    return [
        f"High: {_round_half_away(summary.avg_high_c)}°C",
        f"Low: {_round_half_away(summary.avg_low_c)}°C",
        f"Rain: {summary.avg_precip_mm:.1f} mm",
        f"Wind: {_round_half_away(summary.avg_wind_kph)} km/h",
    ]
