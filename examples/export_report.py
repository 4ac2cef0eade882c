"""Fetch odds concurrently for two cities and export each as JSON."""

import asyncio
import tempfile
from datetime import date
from pathlib import Path

from geopulse import AsyncClimateClient, GeoCoordinate, get_preset
from geopulse.export import build_export, share_text, write_export

CITIES = {
    "Paris": GeoCoordinate(latitude=48.8566, longitude=2.3522),
    "Sydney": GeoCoordinate(latitude=-33.8688, longitude=151.2093),
}


async def main() -> None:
    preset = get_preset("Mild & Pleasant")
    target = date(2026, 12, 24)
    out_dir = Path(tempfile.mkdtemp(prefix="geopulse-"))

    async with AsyncClimateClient() as client:
        reports = await asyncio.gather(
            *(client.odds(coord, target, preset.thresholds) for coord in CITIES.values())
        )

    for (name, coord), report in zip(CITIES.items(), reports):
        print(share_text(report.results, target, name))
        doc = build_export(report, target, coordinate=coord, location_name=name, preset=preset)
        city_dir = out_dir / name
        city_dir.mkdir()
        print(f"  -> {write_export(doc, city_dir)}\n")


if __name__ == "__main__":
    asyncio.run(main())
