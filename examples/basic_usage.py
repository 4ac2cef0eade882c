"""Basic usage examples for the GeoPulse client."""

from datetime import date

from geopulse import ClimateClient, GeoCoordinate, ThresholdSet, get_preset, resolve_thresholds
from geopulse.export import format_summary, risk_advice


def main() -> None:
    dubai = GeoCoordinate(latitude=25.2048, longitude=55.2708)
    wedding_day = date(2026, 7, 14)

    with ClimateClient() as client:
        # Custom thresholds
        print("=== Custom thresholds ===")
        report = client.odds(dubai, wedding_day, ThresholdSet(max_hot=40, max_wind=30))
        for r in report.results:
            print(f"  {r.label}: {r.value_percent:.0f}%  ({r.note})")

        # Preset with one override; the series is served from the cache
        print("\n=== Warm & Sunny, rain threshold lowered to 1 mm ===")
        thresholds = resolve_thresholds(get_preset("Warm & Sunny"), ThresholdSet(max_rain=1))
        report = client.odds(dubai, wedding_day, thresholds)
        for r in report.results:
            print(f"  {r.label}: {r.value_percent:.0f}%")

        print(f"\n=== Typical conditions ({report.sample_size} years) ===")
        if report.summary is None:
            print("  No historical data for this day.")
        else:
            for line in format_summary(report.summary):
                print(f"  {line}")

        print(f"\n{risk_advice(report.results)}")


if __name__ == "__main__":
    main()
