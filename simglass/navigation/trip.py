# simglass/navigation/trip.py
"""
Trip planning: leg and route times at a chosen groundspeed, the resulting
ETA and the en-route safe altitude.

The groundspeed is either the sensed one or a pilot-entered value clamped to
the manual range. Nothing here touches the plan's own leg ETEs, which stay at
the planning speed.
"""
from datetime import datetime, timezone
from typing import Optional

from .constants import NavConstants, TripConstants
from .core import format_eta
from .data_models import TripLeg, TripPlan
from .flight_plan import FlightPlan


def clamp_manual_groundspeed(groundspeed_kts: float) -> float:
    return min(max(groundspeed_kts, TripConstants.MIN_MANUAL_GROUNDSPEED_KTS),
               TripConstants.MAX_MANUAL_GROUNDSPEED_KTS)


def select_groundspeed(sensor_kts: Optional[float], manual_kts: float, use_sensor: bool = True) -> float:
    """Sensor groundspeed when selected and moving, else the clamped manual entry."""
    if use_sensor and sensor_kts is not None and sensor_kts > 0:
        return sensor_kts
    return clamp_manual_groundspeed(manual_kts)


def leg_minutes(distance_nm: float, groundspeed_kts: float) -> Optional[float]:
    if groundspeed_kts <= 0:
        return None
    return distance_nm / groundspeed_kts * 60


def format_trip_ete(minutes: Optional[float]) -> str:
    """M:SS with the seconds carried into the minute. Zero-length legs read 0:00."""
    if minutes is None:
        return NavConstants.TIME_UNKNOWN
    whole, seconds = divmod(int(round(minutes * 60)), 60)
    return f"{whole}:{seconds:02d}"


def trip_plan(flight_plan: FlightPlan, groundspeed_kts: float,
              now: Optional[datetime] = None) -> TripPlan:
    now = now or datetime.now(timezone.utc)
    legs = []
    for wp in flight_plan.waypoints:
        minutes = leg_minutes(wp.leg_distance_nm, groundspeed_kts)
        legs.append(TripLeg(
            identifier=wp.identifier,
            waypoint_type=wp.waypoint_type,
            desired_track_deg=wp.desired_track_deg,
            distance_nm=wp.leg_distance_nm,
            ete_min=minutes,
            ete=format_trip_ete(minutes),
            altitude_ft=wp.altitude_ft or 0,
        ))

    total_distance = flight_plan.total_distance_nm
    total_minutes = leg_minutes(total_distance, groundspeed_kts)
    return TripPlan(
        groundspeed_kts=groundspeed_kts,
        legs=legs,
        total_distance_nm=total_distance,
        total_ete_min=total_minutes,
        total_ete=format_trip_ete(total_minutes),
        eta=format_eta(now, None if total_minutes is None else total_minutes * 60),
        esa_ft=max((leg.altitude_ft for leg in legs), default=0) + TripConstants.ESA_MARGIN_FT,
    )
