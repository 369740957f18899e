# simglass/airplane/data_models.py
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AircraftPerformanceProfile:
    """Crosswind capability of one aircraft type, in knots."""
    aircraft_id: str
    name: str
    short_name: str
    crosswind_limit_kt: int
    crosswind_caution_kt: int
    category: str  # SE | ME | JET


@dataclass(frozen=True)
class FuelState:
    """Fuel on board. Replaced, never edited, on every burn step or telemetry read."""
    current_lbs: float
    max_lbs: float
    flow_pph: float
    endurance: str = "--:--"


@dataclass(frozen=True)
class DestinationFuel:
    """Fuel planning toward the destination. All None while the aircraft is not moving."""
    fuel_to_destination_lbs: Optional[float]
    fuel_at_destination_lbs: Optional[float]
    reserve_ok: Optional[bool]
