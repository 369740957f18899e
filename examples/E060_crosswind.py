#!/usr/bin/env python3
# examples/E060_crosswind.py

import sys
import logging
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from simglass.airplane.core import get_profile
from simglass.runway import AptDatRunwayLoader, RunwayCondition, WindComponentResolver, WeatherProvider


def main(station: str = "KMRY", aircraft_type: str = "c172"):
    weather = WeatherProvider()
    report = weather.get_wind(station)
    wind = report.wind
    gust = f"G{wind.gust_kts:.0f}" if wind.gust_kts else ""
    direction = "VRB" if wind.is_variable else f"{wind.direction_deg:03.0f}"
    print(f"{station} wind {direction}/{wind.speed_kts:.0f}{gust} ({report.source}{', degraded' if report.degraded else ''})")

    resolver = WindComponentResolver(AptDatRunwayLoader(), get_profile(aircraft_type))
    for condition in (RunwayCondition.DRY, RunwayCondition.WET, RunwayCondition.ICE):
        print(f"\n--- {condition.value.upper()} runways, {resolver.profile.name} ---")
        for runway in resolver.runway_source.get_runways(station):
            resolver.set_condition(station, runway.runway_id, condition)
        for a in resolver.assess(station, wind):
            side = "R" if a.crosswind_kt > 0 else "L"
            print(f"RWY {a.end:>4}  HW {a.headwind_kt:+3d}  XW {abs(a.crosswind_kt):2d}{side}  "
                  f"limit {a.effective_limit_kt}/{a.effective_caution_kt}  {a.status.value.upper()}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    main(*sys.argv[1:3])
