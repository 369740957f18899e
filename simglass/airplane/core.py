# simglass/airplane/core.py

import time
from typing import Any, Dict

from .constants import AircraftProfiles, FuelConstants
from .data_models import AircraftPerformanceProfile
from .exceptions import FlightSystemException, FuelSystemException, UnknownAircraftError
from .systems.flight import FlightSystem
from .systems.fuel import FuelSystem


def get_profile(aircraft_id: str) -> AircraftPerformanceProfile:
    """Looks up a performance profile by id (case-insensitive)"""
    profile = AircraftProfiles.TABLE.get((aircraft_id or "").strip().lower())
    if profile is None:
        raise UnknownAircraftError(aircraft_id)
    return profile


def default_profile() -> AircraftPerformanceProfile:
    return AircraftProfiles.TABLE[AircraftProfiles.DEFAULT_AIRCRAFT]


class ExternalAircraft:
    """Aggregates the FlightGear-backed systems into one telemetry read"""

    def __init__(self, fg_connection):
        """
        Args:
            fg_connection: Connected FGConnection instance
        """
        self.fg = fg_connection
        self._systems = {
            'fuel': FuelSystem(fg_connection),
            'flight': FlightSystem(fg_connection)
        }
        self._last_update = 0

    def get_telemetry(self) -> Dict[str, Any]:
        """
        Reads flight fields, fuel and surface wind.

        Raises:
            FlightSystemException / FuelSystemException when a read fails.
        """
        self._last_update = time.time()
        return {
            'timestamp': self._last_update,
            'flight': self._systems['flight'].read_fields(),
            'fuel': self._get_fuel_state(),
            'wind': self._get_wind(),
        }

    def _get_fuel_state(self):
        try:
            return self._systems['fuel'].update()
        except FuelSystemException:
            raise
        except Exception as e:
            raise FuelSystemException(f"Fuel system error: {str(e)}") from e

    def _get_wind(self) -> Dict[str, float]:
        props = FuelConstants.PROPERTIES.ENVIRONMENT
        values = {}
        for key, prop in (('direction_deg', props.WIND_FROM_DEG), ('speed_kts', props.WIND_SPEED_KT)):
            response = self.fg.get(prop)
            if not response['success']:
                raise FlightSystemException(f"Failed to read {prop}: {response.get('message', 'No details')}")
            values[key] = float(response['data']['value'])
        return values
