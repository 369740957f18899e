# simglass/navigation/data_models.py
"""
Core data structures for the navigation subsystem. Waypoints are the only
mutable records (the plan owns them); everything else is a frozen read model
rebuilt on every update.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class WaypointType(Enum):
    AIRPORT = "airport"
    VOR = "vor"
    NDB = "ndb"
    FIX = "fix"
    USER = "user"


@dataclass
class Waypoint:
    """A single flight-plan entry. Track and distance are derived by the plan."""
    identifier: str
    lat: float
    lon: float
    waypoint_type: WaypointType = WaypointType.FIX
    altitude_ft: Optional[int] = None
    desired_track_deg: Optional[float] = None
    leg_distance_nm: float = 0.0
    ete: str = "00:00"
    active: bool = False


@dataclass(frozen=True)
class AircraftState:
    """Telemetry sample from whichever source is active."""
    lat: float
    lon: float
    altitude_ft: float = 0.0
    airspeed_kts: float = 0.0
    groundspeed_kts: float = 0.0
    heading_deg: float = 0.0
    vertical_speed_fpm: float = 0.0
    mach: float = 0.0


@dataclass(frozen=True)
class NavigationSnapshot:
    current_waypoint: str
    next_waypoint: str
    distance_to_next_nm: float
    total_distance_nm: float
    distance_remaining_nm: float
    ete_seconds: Optional[float]
    eta: str
    dtk: float
    active_leg_index: int
    direct_to_active: bool = False
    obs_active: bool = False


@dataclass(frozen=True)
class VnavConstraintResult:
    """Per-leg VNAV toward the next altitude constraint."""
    target_waypoint: Optional[str]
    target_altitude_ft: Optional[int]
    distance_to_constraint_nm: float
    required_vs_fpm: Optional[int]


@dataclass(frozen=True)
class VnavProfileResult:
    """Angle-based descent profile toward a target altitude."""
    altitude_difference_ft: float
    distance_to_target_nm: float
    distance_needed_nm: float
    distance_to_tod_nm: float
    time_to_tod_min: Optional[float]
    time_to_tod: str
    required_vs_fpm: Optional[float]
    status: str


@dataclass(frozen=True)
class ImportResult:
    """Waypoints parsed from an import source plus the rows that were dropped."""
    waypoints: List[Waypoint]
    skipped: List[Tuple[int, str]] = field(default_factory=list)
    source: str = "text"
    aircraft_id: Optional[str] = None


@dataclass(frozen=True)
class TripLeg:
    identifier: str
    waypoint_type: WaypointType
    desired_track_deg: Optional[float]
    distance_nm: float
    ete_min: Optional[float]
    ete: str
    altitude_ft: int


@dataclass(frozen=True)
class TripPlan:
    """Trip-planning page: legs timed at one groundspeed, with totals and ESA."""
    groundspeed_kts: float
    legs: List[TripLeg]
    total_distance_nm: float
    total_ete_min: Optional[float]
    total_ete: str
    eta: str
    esa_ft: int
