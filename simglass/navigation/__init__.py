# simglass/navigation/__init__.py

"""
navigation - Flight-plan model, live navigation snapshot and VNAV for the
SimGlass avionics engine.
"""

# Local Imports
from .core import NavigationComputer, snapshot_to_dict
from .data_models import (
    AircraftState,
    ImportResult,
    NavigationSnapshot,
    TripLeg,
    TripPlan,
    VnavConstraintResult,
    VnavProfileResult,
    Waypoint,
    WaypointType,
)
from .exceptions import (
    InvalidPlanError,
    NavigationError,
    OutOfRangeError,
    PlanImportError,
    UnknownWaypointError,
    VnavError,
)
from .flight_plan import FlightPlan
from .plan_io import export_garmin_fpl, import_plan
from .trip import select_groundspeed, trip_plan
from .vnav import VnavComputer, VnavSettings

__all__ = [
    'NavigationComputer',
    'snapshot_to_dict',
    'AircraftState',
    'ImportResult',
    'NavigationSnapshot',
    'TripLeg',
    'TripPlan',
    'VnavConstraintResult',
    'VnavProfileResult',
    'Waypoint',
    'WaypointType',
    'InvalidPlanError',
    'NavigationError',
    'OutOfRangeError',
    'PlanImportError',
    'UnknownWaypointError',
    'VnavError',
    'FlightPlan',
    'export_garmin_fpl',
    'import_plan',
    'select_groundspeed',
    'trip_plan',
    'VnavComputer',
    'VnavSettings',
]
