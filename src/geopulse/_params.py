"""Query parameter builder for the NASA POWER daily point endpoint."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from geopulse import config


def _format_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, Sequence):
        return ",".join(str(v) for v in value)
    return str(value)


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples from keyword arguments.

    None values are skipped. Sequences are joined with commas, which is how
    the provider expects multi-valued parameters such as ``parameters``.

    Returns:
        List of (key, value) tuples suitable for httpx params.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        params.append((key, _format_value(value)))
    return params


def daily_point_params(latitude: float, longitude: float) -> list[tuple[str, str]]:
    """Parameters for a 40-year daily point request at one coordinate."""
    return build_query_params(
        parameters=config.PARAMETERS,
        community=config.COMMUNITY,
        longitude=longitude,
        latitude=latitude,
        start=config.START_YEAR,
        end=config.END_YEAR,
        format="JSON",
    )
