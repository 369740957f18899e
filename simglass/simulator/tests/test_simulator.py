# simglass/simulator/tests/test_simulator.py
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

import unittest
from unittest.mock import MagicMock

import numpy as np

from simglass.navigation.data_models import Waypoint
from simglass.navigation.flight_plan import FlightPlan
from simglass.simulator.core import FlightProgressSimulator, SimulationContext
from simglass.simulator.exceptions import SimulationSetupError


def fixed_rng(value: float) -> MagicMock:
    rng = MagicMock()
    rng.random.return_value = value
    return rng


class TestFlightProgressSimulator(unittest.TestCase):
    def setUp(self):
        self.waypoints = FlightPlan.demo().waypoints

    def test_starts_on_first_leg(self):
        context = FlightProgressSimulator.start()
        self.assertEqual(context.leg_index, 1)
        self.assertEqual(context.leg_progress, 0.0)
        self.assertFalse(context.finished)

    def test_tick_with_midpoint_noise(self):
        sim = FlightProgressSimulator(fixed_rng(0.5))
        context, state = sim.tick(SimulationContext(), self.waypoints)

        self.assertEqual(context.leg_index, 1)
        self.assertAlmostEqual(context.leg_progress, 0.0065)
        self.assertEqual(state.groundspeed_kts, 120)
        self.assertEqual(state.airspeed_kts, 113)
        self.assertEqual(state.vertical_speed_fpm, 150)
        self.assertEqual(state.altitude_ft, 2250)
        self.assertEqual(state.mach, 0.18)

    def test_position_lies_on_the_active_leg(self):
        sim = FlightProgressSimulator(fixed_rng(0.5))
        context = SimulationContext(leg_index=2, leg_progress=0.4935)
        context, state = sim.tick(context, self.waypoints)

        start, end = self.waypoints[1], self.waypoints[2]
        self.assertAlmostEqual(context.leg_progress, 0.5)
        self.assertAlmostEqual(state.lat, (start.lat + end.lat) / 2)
        self.assertAlmostEqual(state.lon, (start.lon + end.lon) / 2)
        # Past the transition window the vertical speed is level-flight wobble
        self.assertEqual(state.vertical_speed_fpm, 0)
        self.assertEqual(state.altitude_ft, 3000)

    def test_cruise_altitude_after_second_leg(self):
        sim = FlightProgressSimulator(fixed_rng(0.5))
        _, state = sim.tick(SimulationContext(leg_index=5, leg_progress=0.5), self.waypoints)
        self.assertEqual(state.altitude_ft, 3000)

    def test_leg_transition(self):
        sim = FlightProgressSimulator(fixed_rng(0.5))
        context, _ = sim.tick(SimulationContext(leg_index=1, leg_progress=0.999), self.waypoints)
        self.assertEqual(context.leg_index, 2)
        self.assertEqual(context.leg_progress, 0.0)

    def test_halts_at_destination(self):
        sim = FlightProgressSimulator(fixed_rng(0.5))
        last = len(self.waypoints) - 1
        context, state = sim.tick(SimulationContext(leg_index=last, leg_progress=0.999), self.waypoints)

        self.assertTrue(context.finished)
        self.assertEqual(context.leg_index, last)
        self.assertEqual((state.lat, state.lon), (self.waypoints[-1].lat, self.waypoints[-1].lon))
        self.assertEqual(state.groundspeed_kts, 0.0)

        again, held = sim.tick(context, self.waypoints)
        self.assertTrue(again.finished)
        self.assertEqual(held, state)

    def test_seeded_generators_replay_the_same_flight(self):
        def fly(seed):
            sim = FlightProgressSimulator(np.random.default_rng(seed))
            context, states = SimulationContext(), []
            for _ in range(50):
                context, state = sim.tick(context, self.waypoints)
                states.append(state)
            return states

        self.assertEqual(fly(7), fly(7))
        self.assertNotEqual(fly(7), fly(8))

    def test_values_stay_in_range(self):
        sim = FlightProgressSimulator(np.random.default_rng(3))
        context = SimulationContext()
        for _ in range(300):
            context, state = sim.tick(context, self.waypoints)
            self.assertTrue(115 <= state.groundspeed_kts <= 124)
            self.assertTrue(state.groundspeed_kts - 10 <= state.airspeed_kts <= state.groundspeed_kts - 5)
            self.assertTrue(-30 <= state.vertical_speed_fpm < 300)
            self.assertTrue(0 <= state.heading_deg <= 360)

    def test_context_is_not_mutated(self):
        sim = FlightProgressSimulator(fixed_rng(0.5))
        context = SimulationContext()
        sim.tick(context, self.waypoints)
        self.assertEqual(context.leg_progress, 0.0)

    def test_needs_two_waypoints(self):
        sim = FlightProgressSimulator(fixed_rng(0.5))
        with self.assertRaises(SimulationSetupError):
            sim.tick(SimulationContext(), [Waypoint("KSNS", 36.66, -121.61)])

    def test_shorter_plan_clamps_leg_index(self):
        sim = FlightProgressSimulator(fixed_rng(0.5))
        short = self.waypoints[:2]
        context, _ = sim.tick(SimulationContext(leg_index=6, leg_progress=0.2), short)
        self.assertEqual(context.leg_index, 1)

    def test_demonstration_seed_values(self):
        sim = FlightProgressSimulator(fixed_rng(0.5))
        fuel = sim.initial_fuel()
        self.assertEqual(fuel.current_lbs, 8200.0)
        self.assertEqual(fuel.max_lbs, 12000.0)
        self.assertEqual(fuel.flow_pph, 1800.0)
        self.assertEqual(fuel.endurance, "4:33")

        weather = sim.initial_weather()
        self.assertEqual(weather.station, "KMRY")
        self.assertEqual(weather.wind.direction_deg, 310)
        self.assertEqual(weather.wind.speed_kts, 12)


if __name__ == '__main__':
    unittest.main()
