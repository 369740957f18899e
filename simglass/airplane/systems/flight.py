# simglass/airplane/systems/flight.py

# Standard import
from typing import Dict

# Local import
from ..constants import FuelConstants
from ..exceptions import FlightSystemException


class FlightSystem:
    """Reads position and motion from FlightGear as AircraftState fields"""

    def __init__(self, fg_connection):
        """
        Args:
            fg_connection: Connected FGConnection instance
        """
        self.fg = fg_connection
        self.props = FuelConstants.PROPERTIES.FLIGHT

    def read_fields(self) -> Dict[str, float]:
        """Returns the bridge-owned AircraftState fields as a dict"""
        try:
            return {
                'lat': self._get('LATITUDE'),
                'lon': self._get('LONGITUDE'),
                'altitude_ft': self._get('ALTITUDE_FT'),
                'heading_deg': self._get('HEADING_DEG'),
                'airspeed_kts': self._get('AIRSPEED_KT'),
                'groundspeed_kts': self._get('GROUNDSPEED_KT'),
                # FlightGear reports feet per second
                'vertical_speed_fpm': self._get('VERTICAL_SPEED_FPS') * 60,
                'mach': self._get('MACH'),
            }
        except Exception as e:
            raise FlightSystemException(f"Flight system error: {str(e)}") from e

    def _get(self, key: str) -> float:
        """Fetches a flight property from FlightGear"""
        prop_path = getattr(self.props, key)
        response = self.fg.get(prop_path)
        if not response['success']:
            raise ValueError(f"Failed to read {key}: {response.get('message', 'No details')}")
        return float(response['data']['value'])
