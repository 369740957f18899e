#!/usr/bin/env python3
# examples/E070_flight_plan.py

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from simglass.navigation import FlightPlan, VnavComputer, VnavSettings, export_garmin_fpl, import_plan

ROUTE = """
# KSNS to KMRY via the coast
KSNS,36.6628,-121.6064
MANNA,36.72,-121.71
SISGY,36.81,-121.90
KMRY,36.587,-121.843
"""

def main():
    result = import_plan(ROUTE, "route.txt")
    plan = FlightPlan(result.waypoints)

    print(f"{'WPT':<6} {'DTK':>4} {'DIS':>6} {'ETE':>6}")
    for wp in plan.waypoints:
        dtk = "---" if wp.desired_track_deg is None else f"{round(wp.desired_track_deg) % 360:03d}"
        print(f"{wp.identifier:<6} {dtk:>4} {wp.leg_distance_nm:6.1f} {wp.ete:>6}")
    print(f"Total: {plan.total_distance_nm:.1f} NM")

    vnav = VnavComputer(plan, VnavSettings(target_altitude_ft=1000))
    profile = vnav.profile(current_altitude_ft=4500, groundspeed_kts=120,
                           distance_remaining_nm=plan.total_distance_nm)
    print(f"\nTOD in {profile.distance_to_tod_nm:.1f} NM ({profile.time_to_tod}), status {profile.status}")

    print("\n" + export_garmin_fpl(plan))

if __name__ == "__main__":
    main()
