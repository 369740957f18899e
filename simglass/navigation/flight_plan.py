# simglass/navigation/flight_plan.py
"""
The flight-plan model: an ordered waypoint sequence with an active leg, plus
the direct-to and OBS overrides that sit on top of it without altering it.

Imported coordinates are authoritative. Desired track and leg distance are
always recomputed here and never taken from an import source.
"""
import logging
import math
from dataclasses import replace
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .constants import NavConstants
from .data_models import Waypoint, WaypointType
from .exceptions import InvalidPlanError, OutOfRangeError, UnknownWaypointError
from .utils.coordinates import calculate_bearing, haversine_distance_nm

logger = logging.getLogger(__name__)

# Demonstration route (Salinas to Monterey) used by the synthetic source
DEMO_ROUTE: Tuple[Tuple[str, WaypointType, float, float, Optional[int]], ...] = (
    ("KSNS", WaypointType.AIRPORT, 36.6628, -121.6064, 137),
    ("MANNA", WaypointType.FIX, 36.7200, -121.7100, 3000),
    ("GIPVY", WaypointType.FIX, 36.7600, -121.8200, 3000),
    ("JELCO", WaypointType.FIX, 36.7900, -121.8700, 2500),
    ("SISGY", WaypointType.FIX, 36.8100, -121.9000, 2000),
    ("RW31", WaypointType.FIX, 36.5700, -121.8400, 1500),
    ("MAFAF", WaypointType.FIX, 36.5900, -121.8600, 500),
    ("KMRY", WaypointType.AIRPORT, 36.5870, -121.8430, 257),
)


def format_leg_ete(distance_nm: float, groundspeed_kts: float = NavConstants.PLANNING_GROUNDSPEED_KTS) -> str:
    """Leg time as MM:SS at the planning groundspeed."""
    if distance_nm <= 0 or groundspeed_kts <= 0:
        return "00:00"
    minutes, seconds = divmod(int(round(distance_nm / groundspeed_kts * 3600)), 60)
    return f"{minutes:02d}:{seconds:02d}"


def _is_valid_coord(lat: float, lon: float) -> bool:
    return (math.isfinite(lat) and math.isfinite(lon)
            and -90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0)


def compute_legs(waypoints: Sequence[Waypoint]) -> List[Waypoint]:
    """Returns copies of the waypoints with DTK, leg distance and leg ETE derived from coordinates."""
    legs = []
    for i, wp in enumerate(waypoints):
        if i == 0:
            legs.append(replace(wp, desired_track_deg=None, leg_distance_nm=0.0, ete="00:00", active=False))
            continue
        prev = waypoints[i - 1]
        distance = haversine_distance_nm(prev.lat, prev.lon, wp.lat, wp.lon)
        track = calculate_bearing(prev.lat, prev.lon, wp.lat, wp.lon) if distance > 0 else None
        legs.append(replace(
            wp,
            desired_track_deg=track,
            leg_distance_nm=distance,
            ete=format_leg_ete(distance),
            active=False,
        ))
    return legs


class FlightPlan:
    """Ordered waypoint sequence with active-leg, direct-to and OBS state."""

    def __init__(self, waypoints: Iterable[Waypoint]):
        self._waypoints: List[Waypoint] = []
        self._leg_distances = np.zeros(0)
        self.active_leg_index = 0
        self._direct_to: Optional[Waypoint] = None
        self.obs_mode = False
        self.obs_course = 0.0
        self.replace_plan(waypoints)

    @classmethod
    def demo(cls) -> "FlightPlan":
        return cls(
            Waypoint(identifier=ident, waypoint_type=wp_type, lat=lat, lon=lon, altitude_ft=alt)
            for ident, wp_type, lat, lon, alt in DEMO_ROUTE
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def replace_plan(self, waypoints: Iterable[Waypoint]) -> None:
        """Validates and installs a new sequence. Rejected plans leave the current one untouched."""
        candidate = list(waypoints)
        if len(candidate) < 1:
            raise InvalidPlanError("A flight plan needs at least one waypoint")

        seen = set()
        for i, wp in enumerate(candidate):
            if not wp.identifier or not wp.identifier.strip():
                raise InvalidPlanError(f"Waypoint {i} has no identifier")
            if wp.identifier in seen:
                raise InvalidPlanError(f"Duplicate waypoint identifier: {wp.identifier}")
            if not _is_valid_coord(wp.lat, wp.lon):
                raise InvalidPlanError(f"Waypoint {wp.identifier} has invalid coordinates ({wp.lat}, {wp.lon})")
            seen.add(wp.identifier)

        self._waypoints = compute_legs(candidate)
        self._leg_distances = np.array([wp.leg_distance_nm for wp in self._waypoints], dtype=float)
        self._direct_to = None
        self._set_active(0)
        logger.info(f"Flight plan loaded: {len(self._waypoints)} waypoints, "
                    f"{self.total_distance_nm:.1f} NM")

    def set_active_waypoint(self, index: int) -> None:
        if not 0 <= index < len(self._waypoints):
            raise OutOfRangeError(index, len(self._waypoints))
        self._set_active(index)

    def _set_active(self, index: int) -> None:
        for i, wp in enumerate(self._waypoints):
            wp.active = i == index
        self.active_leg_index = index

    def activate_direct_to(self, target: Union[str, Waypoint]) -> Waypoint:
        """Routes directly to a plan waypoint (by identifier) or an off-plan waypoint."""
        if isinstance(target, Waypoint):
            if not _is_valid_coord(target.lat, target.lon):
                raise InvalidPlanError(f"Direct-to target {target.identifier} has invalid coordinates")
            resolved = replace(target, active=False)
        else:
            resolved = self.find(target)
            if resolved is None:
                raise UnknownWaypointError(target)
        self._direct_to = resolved
        logger.info(f"Direct-to {resolved.identifier} activated")
        return resolved

    def cancel_direct_to(self) -> None:
        self._direct_to = None

    def set_obs_mode(self, on: bool) -> None:
        self.obs_mode = bool(on)

    def set_obs_course(self, course: float) -> None:
        self.obs_course = float(course) % 360

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def waypoints(self) -> Tuple[Waypoint, ...]:
        return tuple(self._waypoints)

    def __len__(self) -> int:
        return len(self._waypoints)

    @property
    def direct_to(self) -> Optional[Waypoint]:
        return self._direct_to

    @property
    def total_distance_nm(self) -> float:
        return float(np.sum(self._leg_distances))

    def find(self, identifier: str) -> Optional[Waypoint]:
        index = self.index_of(identifier)
        return self._waypoints[index] if index is not None else None

    def index_of(self, identifier: str) -> Optional[int]:
        for i, wp in enumerate(self._waypoints):
            if wp.identifier == identifier:
                return i
        return None

    @property
    def to_waypoint(self) -> Waypoint:
        return self._waypoints[self.active_leg_index]

    @property
    def from_waypoint(self) -> Optional[Waypoint]:
        if self.active_leg_index == 0:
            return None
        return self._waypoints[self.active_leg_index - 1]

    def remaining_leg_distance_nm(self, after_index: int) -> float:
        """Sum of the legs that follow the waypoint at after_index."""
        return float(np.sum(self._leg_distances[after_index + 1:]))

    def distance_between_nm(self, start_index: int, end_index: int) -> float:
        """Sum of leg distances of waypoints start_index..end_index inclusive."""
        return float(np.sum(self._leg_distances[start_index:end_index + 1]))

    def next_altitude_constraint(self, after_index: int) -> Optional[Tuple[int, Waypoint]]:
        for i in range(after_index + 1, len(self._waypoints)):
            if self._waypoints[i].altitude_ft is not None:
                return i, self._waypoints[i]
        return None
