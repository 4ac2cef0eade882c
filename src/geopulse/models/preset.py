"""Comfort presets: named threshold bundles."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from geopulse.models.odds import ThresholdSet


class ComfortPreset(BaseModel):
    """A named set of thresholds a user can pick instead of typing values."""

    model_config = ConfigDict(frozen=True)

    name: str
    emoji: str
    description: str
    thresholds: ThresholdSet

    @property
    def display_name(self) -> str:
        return f"{self.emoji} {self.name}"


PRESETS: tuple[ComfortPreset, ...] = (
    ComfortPreset(
        name="Warm & Sunny",
        emoji="☀️",
        description="Prefer heat, avoid rain/wind.",
        thresholds=ThresholdSet(max_hot=35, min_cold=15, max_rain=5, max_wind=25),
    ),
    ComfortPreset(
        name="Mild & Pleasant",
        emoji="🙂",
        description="Comfortable temps, little rain.",
        thresholds=ThresholdSet(max_hot=30, min_cold=10, max_rain=8, max_wind=30),
    ),
    ComfortPreset(
        name="Cool & Breezy",
        emoji="🍃",
        description="Cooler temps, OK with wind.",
        thresholds=ThresholdSet(max_hot=25, min_cold=5, max_rain=10, max_wind=35),
    ),
)


def get_preset(name: str) -> ComfortPreset:
    """Return the built-in preset called ``name``."""
    for preset in PRESETS:
        if preset.name == name:
            return preset
    raise KeyError(f"Unknown preset: {name!r}")


def resolve_thresholds(
    preset: ComfortPreset | None = None,
    custom: ThresholdSet | None = None,
) -> ThresholdSet:
    """Merge field by field, custom values overriding the preset's."""
    base = preset.thresholds if preset is not None else ThresholdSet()
    if custom is None:
        return base

    def pick(name: str) -> float | None:
        value = getattr(custom, name)
        return value if value is not None else getattr(base, name)

    return ThresholdSet(
        max_hot=pick("max_hot"),
        min_cold=pick("min_cold"),
        max_rain=pick("max_rain"),
        max_wind=pick("max_wind"),
    )
