# simglass/navigation/vnav.py
"""
Vertical navigation. Two separate computations serve two different pages and
are kept apart:

* constraint VNAV (flight-plan page): vertical speed needed to reach the next
  altitude constraint, normalized by distance rather than groundspeed.
* profile VNAV (VCALC page): top-of-descent along a fixed descent angle to a
  pilot-selected target altitude at the destination.
"""
import math
from dataclasses import dataclass
from typing import Optional

from .constants import NavConstants, VnavConstants
from .data_models import VnavConstraintResult, VnavProfileResult
from .exceptions import VnavError
from .flight_plan import FlightPlan


@dataclass
class VnavSettings:
    """Pilot inputs for the descent profile."""
    target_altitude_ft: float = VnavConstants.DEFAULT_TARGET_ALT_FT
    descent_angle_deg: float = VnavConstants.DEFAULT_DESCENT_ANGLE_DEG
    offset_nm: float = VnavConstants.DEFAULT_OFFSET_NM
    enabled: bool = True


def constraint_vnav(flight_plan: FlightPlan) -> VnavConstraintResult:
    """
    Plan-page VS from the active waypoint's planned altitude (0 when unset)
    to the next altitude constraint. Live aircraft altitude is not an input.
    """
    active = flight_plan.active_leg_index
    active_altitude = flight_plan.waypoints[active].altitude_ft or 0
    found = flight_plan.next_altitude_constraint(active)
    if found is None:
        return VnavConstraintResult(None, None, 0.0, None)

    index, waypoint = found
    distance = flight_plan.distance_between_nm(active, index)
    required_vs = None
    if distance > 0:
        required_vs = int(round(
            (waypoint.altitude_ft - active_altitude) / distance * VnavConstants.CONSTRAINT_VS_SCALE
        ))
    return VnavConstraintResult(
        target_waypoint=waypoint.identifier,
        target_altitude_ft=waypoint.altitude_ft,
        distance_to_constraint_nm=distance,
        required_vs_fpm=required_vs,
    )


def descent_distance_nm(altitude_to_lose_ft: float, descent_angle_deg: float) -> float:
    """Ground distance covered while losing altitude_to_lose_ft on the given path angle."""
    if not 0 < descent_angle_deg < 90:
        raise VnavError(f"Descent angle must be between 0 and 90 degrees, got {descent_angle_deg}")
    return altitude_to_lose_ft / (math.tan(math.radians(descent_angle_deg)) * NavConstants.FEET_PER_NAUTICAL_MILE)


def classify_profile(altitude_difference_ft: float, distance_to_tod_nm: float) -> str:
    if abs(altitude_difference_ft) < VnavConstants.AT_TARGET_BAND_FT:
        return "at-target"
    if altitude_difference_ft < -VnavConstants.AT_TARGET_BAND_FT:
        return "below"
    if distance_to_tod_nm < VnavConstants.DESCENDING_TOD_NM:
        return "descending"
    if distance_to_tod_nm < VnavConstants.APPROACHING_TOD_NM:
        return "approaching"
    return "above"


def format_minutes(minutes: Optional[float]) -> str:
    """M:SS, or --:-- when there is nothing to count down."""
    if minutes is None or minutes <= 0:
        return NavConstants.TIME_UNKNOWN
    whole, seconds = divmod(int(round(minutes * 60)), 60)
    return f"{whole}:{seconds:02d}"


def profile_vnav(current_altitude_ft: float, groundspeed_kts: float,
                 distance_to_target_nm: float, settings: VnavSettings) -> VnavProfileResult:
    altitude_difference = current_altitude_ft - settings.target_altitude_ft
    distance_to_target = distance_to_target_nm + settings.offset_nm
    distance_needed = descent_distance_nm(altitude_difference, settings.descent_angle_deg)
    distance_to_tod = max(0.0, distance_to_target - distance_needed)

    time_to_tod = None
    required_vs = None
    if groundspeed_kts > 0:
        time_to_tod = distance_to_tod / groundspeed_kts * 60
        time_to_target = distance_to_target / groundspeed_kts * 60
        if time_to_target > 0:
            required_vs = -(altitude_difference / time_to_target)

    return VnavProfileResult(
        altitude_difference_ft=altitude_difference,
        distance_to_target_nm=distance_to_target,
        distance_needed_nm=distance_needed,
        distance_to_tod_nm=distance_to_tod,
        time_to_tod_min=time_to_tod,
        time_to_tod=format_minutes(time_to_tod),
        required_vs_fpm=required_vs,
        status=classify_profile(altitude_difference, distance_to_tod),
    )


class VnavComputer:
    """Runs both VNAV computations against the current plan and settings."""

    def __init__(self, flight_plan: FlightPlan, settings: Optional[VnavSettings] = None):
        self.flight_plan = flight_plan
        self.settings = settings or VnavSettings()

    def constraint(self) -> VnavConstraintResult:
        return constraint_vnav(self.flight_plan)

    def profile(self, current_altitude_ft: float, groundspeed_kts: float,
                distance_remaining_nm: float) -> Optional[VnavProfileResult]:
        if not self.settings.enabled:
            return None
        return profile_vnav(current_altitude_ft, groundspeed_kts, distance_remaining_nm, self.settings)
