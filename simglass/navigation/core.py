# simglass/navigation/core.py
"""
Derives the live navigation snapshot (course, distances, ETE/ETA) from the
aircraft position and the flight plan. The snapshot is rebuilt in full on
every call; nothing here is stored between updates.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from .constants import NavConstants
from .data_models import AircraftState, NavigationSnapshot
from .flight_plan import FlightPlan
from .utils.coordinates import calculate_bearing, haversine_distance_nm


def compute_ete_seconds(distance_nm: float, groundspeed_kts: float) -> Optional[float]:
    """Time enroute in seconds, or None when the aircraft is not moving."""
    if groundspeed_kts is None or groundspeed_kts <= 0:
        return None
    return distance_nm / groundspeed_kts * 3600


def format_eta(now: datetime, ete_seconds: Optional[float]) -> str:
    if ete_seconds is None:
        return NavConstants.ETA_UNKNOWN
    try:
        eta = now.astimezone(timezone.utc) + timedelta(seconds=ete_seconds)
    except OverflowError:
        # Creeping groundspeed while parked puts the arrival past the calendar
        return NavConstants.ETA_UNKNOWN
    return f"{eta.hour:02d}:{eta.minute:02d} UTC"


def empty_snapshot() -> NavigationSnapshot:
    """Placeholder shown while no telemetry source is active."""
    return NavigationSnapshot(
        current_waypoint=NavConstants.NO_WAYPOINT,
        next_waypoint=NavConstants.NO_WAYPOINT,
        distance_to_next_nm=0.0,
        total_distance_nm=0.0,
        distance_remaining_nm=0.0,
        ete_seconds=None,
        eta=NavConstants.ETA_UNKNOWN,
        dtk=0.0,
        active_leg_index=0,
    )


class NavigationComputer:
    """Computes NavigationSnapshot read models for a flight plan."""

    def __init__(self, flight_plan: FlightPlan):
        self.flight_plan = flight_plan

    def compute(self, aircraft: AircraftState, now: Optional[datetime] = None) -> NavigationSnapshot:
        plan = self.flight_plan
        now = now or datetime.now(timezone.utc)
        direct_to = plan.direct_to
        active_index = plan.active_leg_index

        if direct_to is not None:
            target = direct_to
            target_index = plan.index_of(direct_to.identifier)
        else:
            target = plan.to_waypoint
            target_index = active_index

        distance_to_next = haversine_distance_nm(aircraft.lat, aircraft.lon, target.lat, target.lon)

        # An off-plan direct-to target has no legs after it
        if target_index is None:
            distance_remaining = distance_to_next
        else:
            distance_remaining = distance_to_next + plan.remaining_leg_distance_nm(target_index)

        ete_seconds = compute_ete_seconds(distance_remaining, aircraft.groundspeed_kts)
        from_wp = plan.from_waypoint

        return NavigationSnapshot(
            current_waypoint=from_wp.identifier if from_wp else NavConstants.NO_WAYPOINT,
            next_waypoint=target.identifier,
            distance_to_next_nm=distance_to_next,
            total_distance_nm=plan.total_distance_nm,
            distance_remaining_nm=distance_remaining,
            ete_seconds=ete_seconds,
            eta=format_eta(now, ete_seconds),
            dtk=self._desired_track(aircraft, target, distance_to_next),
            active_leg_index=active_index,
            direct_to_active=direct_to is not None,
            obs_active=plan.obs_mode,
        )

    def _desired_track(self, aircraft: AircraftState, target, distance_to_next: float) -> float:
        plan = self.flight_plan
        if plan.obs_mode:
            return plan.obs_course
        if plan.direct_to is None and target.desired_track_deg is not None:
            return target.desired_track_deg
        # Direct-to, or the first waypoint which has no inbound leg
        if distance_to_next <= NavConstants.COLOCATED_TOLERANCE_NM:
            return target.desired_track_deg or 0.0
        return calculate_bearing(aircraft.lat, aircraft.lon, target.lat, target.lon)


def snapshot_to_dict(snapshot: NavigationSnapshot) -> Dict[str, Any]:
    """Display form: distances to 0.1 NM, track to whole degrees."""
    decimals = NavConstants.DISTANCE_DISPLAY_DECIMALS
    return {
        'current_waypoint': snapshot.current_waypoint,
        'next_waypoint': snapshot.next_waypoint,
        'distance_to_next': round(snapshot.distance_to_next_nm, decimals),
        'total_distance': round(snapshot.total_distance_nm, decimals),
        'distance_remaining': round(snapshot.distance_remaining_nm, decimals),
        'ete_seconds': None if snapshot.ete_seconds is None else int(round(snapshot.ete_seconds)),
        'eta': snapshot.eta,
        'dtk': int(round(snapshot.dtk)) % 360,
        'active_leg_index': snapshot.active_leg_index,
        'direct_to': snapshot.direct_to_active,
        'obs': snapshot.obs_active,
    }
