"""Shared test fixtures and sample provider responses."""

from __future__ import annotations

from typing import Any

import pytest

BASE_URL = "https://power.larc.nasa.gov/api"
DAILY_POINT_URL = f"{BASE_URL}/temporal/daily/point"


def make_power_payload(
    t2m_max: dict[str, float] | None = None,
    t2m_min: dict[str, float] | None = None,
    prectotcorr: dict[str, float] | None = None,
    ws10m: dict[str, float] | None = None,
) -> dict[str, Any]:
    """Build a daily point response, omitting parameters passed as None."""
    parameter: dict[str, Any] = {}
    if t2m_max is not None:
        parameter["T2M_MAX"] = t2m_max
    if t2m_min is not None:
        parameter["T2M_MIN"] = t2m_min
    if prectotcorr is not None:
        parameter["PRECTOTCORR"] = prectotcorr
    if ws10m is not None:
        parameter["WS10M"] = ws10m
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [55.2708, 25.2048, 5.0]},
        "properties": {"parameter": parameter},
        "header": {"title": "NASA/POWER Source Native Resolution Daily Data"},
    }


# Three July 14ths (day 195 in common years) plus neighbours that must not match.
SAMPLE_POWER_RESPONSE = make_power_payload(
    t2m_max={
        "19810714": 36.0,
        "19820714": 34.0,
        "19830714": 28.0,
        "19830713": 50.0,
        "19830715": 50.0,
    },
    t2m_min={
        "19810714": 27.0,
        "19820714": 24.0,
        "19830714": 21.0,
        "19830713": -5.0,
        "19830715": -5.0,
    },
    prectotcorr={
        "19810714": 0.0,
        "19820714": 12.0,
        "19830714": 3.0,
    },
    ws10m={
        "19810714": 5.0,
        "19820714": 2.5,
        "19830714": 10.0,
    },
)


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def power_payload() -> dict[str, Any]:
    return SAMPLE_POWER_RESPONSE
