"""Configuration for the GeoPulse client."""

from __future__ import annotations

import os

# Provider endpoint (NASA POWER, no API key required)
POWER_BASE_URL = os.environ.get("GEOPULSE_POWER_BASE_URL", "https://power.larc.nasa.gov/api")
DAILY_POINT_ENDPOINT = "/temporal/daily/point"
USER_AGENT = os.environ.get("GEOPULSE_USER_AGENT", "GeoPulse Python (educational app)")

# Not configurable
REQUEST_TIMEOUT = 30.0

# Historical window, inclusive
START_YEAR = 1981
END_YEAR = 2020

COMMUNITY = "RE"
PARAMETERS: tuple[str, ...] = ("T2M_MAX", "T2M_MIN", "PRECTOTCORR", "WS10M")

# 4 decimal places is roughly 11 m
COORDINATE_PRECISION = 4

MS_TO_KMH = 3.6

# File logging is off unless a directory is given
LOG_DIR: str | None = os.environ.get("GEOPULSE_LOG_DIR") or None
