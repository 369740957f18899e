# simglass/airplane/systems/fuel.py
"""
Fuel burn, endurance, range and destination planning.

Every function returns a fresh value; FuelState is never edited in place.
Zero flow or zero ground speed yield the explicit unknown markers (None or
"--:--") rather than infinities.
"""
from dataclasses import replace
from typing import Any, Dict, Optional

from ..constants import FuelConstants
from ..data_models import DestinationFuel, FuelState
from ..exceptions import FuelSystemException


def endurance_hours(current_lbs: float, flow_pph: float) -> Optional[float]:
    if flow_pph is None or flow_pph <= 0:
        return None
    return max(0.0, current_lbs) / flow_pph


def format_endurance(hours: Optional[float]) -> str:
    """H:MM, with rounded minutes carried into the hour (never 1:60)."""
    if hours is None or hours <= 0:
        return FuelConstants.ENDURANCE_UNKNOWN
    h, m = divmod(int(round(hours * 60)), 60)
    return f"{h}:{m:02d}"


def burn(state: FuelState, elapsed_seconds: float) -> FuelState:
    """Burns fuel at the current flow for elapsed_seconds, floored at empty tanks."""
    if elapsed_seconds < 0:
        raise ValueError(f"Elapsed time cannot be negative: {elapsed_seconds}")
    current = max(0.0, state.current_lbs - state.flow_pph / 3600 * elapsed_seconds)
    return replace(state, current_lbs=current,
                   endurance=format_endurance(endurance_hours(current, state.flow_pph)))


def range_nm(state: FuelState, groundspeed_kts: float) -> float:
    hours = endurance_hours(state.current_lbs, state.flow_pph)
    if hours is None or groundspeed_kts is None or groundspeed_kts <= 0:
        return 0.0
    return hours * groundspeed_kts


def plan_destination(state: FuelState, distance_remaining_nm: float,
                     groundspeed_kts: float) -> DestinationFuel:
    if groundspeed_kts is None or groundspeed_kts <= 0:
        return DestinationFuel(None, None, None)
    to_destination = distance_remaining_nm / groundspeed_kts * state.flow_pph
    at_destination = max(0.0, state.current_lbs - to_destination)
    reserve = state.flow_pph * FuelConstants.RESERVE_HOURS
    return DestinationFuel(
        fuel_to_destination_lbs=to_destination,
        fuel_at_destination_lbs=at_destination,
        reserve_ok=at_destination > reserve,
    )


def fuel_status(state: FuelState) -> Dict[str, Any]:
    """Percent of capacity on board and the NORMAL / LOW_FUEL / CRITICAL flag."""
    percent = state.current_lbs / state.max_lbs * 100 if state.max_lbs > 0 else 0.0
    if percent < FuelConstants.CRITICAL_FUEL_PERCENT:
        status = 'CRITICAL'
    elif percent < FuelConstants.LOW_FUEL_PERCENT:
        status = 'LOW_FUEL'
    else:
        status = 'NORMAL'
    return {'percent_remaining': percent, 'status': status}


class FuelSystem:
    """Reads fuel quantity, capacity and flow from FlightGear and converts them to pounds"""

    def __init__(self, fg_connection):
        """
        Args:
            fg_connection: Connected FGConnection instance
        """
        self.fg = fg_connection
        self.const = FuelConstants

    def update(self) -> FuelState:
        """Returns the current FuelState. Raises FuelSystemException on a failed read."""
        props = self.const.PROPERTIES.FUEL
        density = self.const.DENSITY_LBS_PER_GAL
        current = self._get(props.TOTAL_GAL) * density
        capacity = self._get(props.CAPACITY_GAL) * density
        flow = self._get(props.FLOW_GPH) * density
        return FuelState(
            current_lbs=current,
            max_lbs=capacity,
            flow_pph=flow,
            endurance=format_endurance(endurance_hours(current, flow)),
        )

    def _get(self, prop: str) -> float:
        response = self.fg.get(prop)
        if not response['success']:
            raise FuelSystemException(f"Failed to read {prop}: {response.get('message', 'No details')}")
        try:
            return float(response['data']['value'])
        except (KeyError, TypeError, ValueError) as e:
            raise FuelSystemException(f"Unreadable value for {prop}: {e}") from e
