#!/usr/bin/env python3
# simglass/airplane/tests/test_aircraft_systems.py
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

import unittest
from unittest.mock import MagicMock

from simglass.airplane.constants import FuelConstants
from simglass.airplane.core import ExternalAircraft, get_profile
from simglass.airplane.exceptions import FlightSystemException, FuelSystemException, UnknownAircraftError
from simglass.airplane.systems.flight import FlightSystem
from simglass.airplane.systems.fuel import FuelSystem

PROPS = FuelConstants.PROPERTIES


def fg_returning(values):
    """Mock FGConnection answering get(prop) from a dict."""
    fg = MagicMock()
    def get(prop):
        if prop in values:
            return {'success': True, 'data': {'value': values[prop]}}
        return {'success': False, 'message': 'Simulated error'}
    fg.get.side_effect = get
    return fg


FLIGHT_VALUES = {
    PROPS.FLIGHT.LATITUDE: 36.6,
    PROPS.FLIGHT.LONGITUDE: -121.8,
    PROPS.FLIGHT.ALTITUDE_FT: 4500.0,
    PROPS.FLIGHT.HEADING_DEG: 250.0,
    PROPS.FLIGHT.AIRSPEED_KT: 110.0,
    PROPS.FLIGHT.GROUNDSPEED_KT: 118.0,
    PROPS.FLIGHT.VERTICAL_SPEED_FPS: -10.0,
    PROPS.FLIGHT.MACH: 0.17,
}
FUEL_VALUES = {
    PROPS.FUEL.TOTAL_GAL: 40.0,
    PROPS.FUEL.CAPACITY_GAL: 56.0,
    PROPS.FUEL.FLOW_GPH: 10.0,
}
WIND_VALUES = {
    PROPS.ENVIRONMENT.WIND_FROM_DEG: 310.0,
    PROPS.ENVIRONMENT.WIND_SPEED_KT: 12.0,
}


class TestFuelSystem(unittest.TestCase):
    def test_converts_gallons_to_pounds(self):
        fuel = FuelSystem(fg_returning(FUEL_VALUES)).update()
        self.assertAlmostEqual(fuel.current_lbs, 268.0)
        self.assertAlmostEqual(fuel.max_lbs, 375.2)
        self.assertAlmostEqual(fuel.flow_pph, 67.0)
        self.assertEqual(fuel.endurance, "4:00")

    def test_failed_read(self):
        with self.assertRaises(FuelSystemException):
            FuelSystem(fg_returning({})).update()


class TestFlightSystem(unittest.TestCase):
    def test_maps_properties_to_aircraft_state_fields(self):
        fields = FlightSystem(fg_returning(FLIGHT_VALUES)).read_fields()
        self.assertEqual(fields["lat"], 36.6)
        self.assertEqual(fields["groundspeed_kts"], 118.0)
        self.assertEqual(fields["vertical_speed_fpm"], -600.0)

    def test_failed_read(self):
        with self.assertRaises(FlightSystemException):
            FlightSystem(fg_returning({})).read_fields()


class TestExternalAircraft(unittest.TestCase):
    def test_telemetry_bundle(self):
        values = dict(FLIGHT_VALUES, **FUEL_VALUES, **WIND_VALUES)
        telemetry = ExternalAircraft(fg_returning(values)).get_telemetry()
        self.assertEqual(telemetry['flight']['heading_deg'], 250.0)
        self.assertAlmostEqual(telemetry['fuel'].current_lbs, 268.0)
        self.assertEqual(telemetry['wind'], {'direction_deg': 310.0, 'speed_kts': 12.0})

    def test_missing_fuel_raises(self):
        aircraft = ExternalAircraft(fg_returning(dict(FLIGHT_VALUES, **WIND_VALUES)))
        with self.assertRaises(FuelSystemException):
            aircraft.get_telemetry()


class TestProfiles(unittest.TestCase):
    def test_lookup_is_case_insensitive(self):
        profile = get_profile("SR22")
        self.assertEqual(profile.crosswind_limit_kt, 20)
        self.assertEqual(profile.crosswind_caution_kt, 16)
        self.assertEqual(profile.category, "SE")

    def test_table_contents(self):
        self.assertEqual(get_profile("c525").category, "JET")
        self.assertEqual(get_profile("be58").category, "ME")
        self.assertEqual(get_profile("c152").crosswind_limit_kt, 12)

    def test_unknown_aircraft(self):
        with self.assertRaises(UnknownAircraftError):
            get_profile("b738")


if __name__ == '__main__':
    unittest.main()
