# simglass/navigation/tests/test_flight_plan.py
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

import unittest

from simglass.navigation.data_models import Waypoint, WaypointType
from simglass.navigation.exceptions import InvalidPlanError, OutOfRangeError, UnknownWaypointError
from simglass.navigation.flight_plan import FlightPlan, format_leg_ete


def equator_plan():
    return FlightPlan([
        Waypoint("AAA", 0.0, 0.0),
        Waypoint("BBB", 0.0, 1.0, altitude_ft=3000),
        Waypoint("CCC", 0.0, 2.0, altitude_ft=1000),
    ])


class TestFlightPlan(unittest.TestCase):
    def setUp(self):
        self.plan = FlightPlan.demo()

    def test_demo_route(self):
        self.assertEqual(len(self.plan), 8)
        self.assertEqual(self.plan.waypoints[0].identifier, "KSNS")
        self.assertEqual(self.plan.waypoints[-1].identifier, "KMRY")
        self.assertEqual(self.plan.waypoints[0].waypoint_type, WaypointType.AIRPORT)

    def test_first_waypoint_has_no_inbound_leg(self):
        first = self.plan.waypoints[0]
        self.assertIsNone(first.desired_track_deg)
        self.assertEqual(first.leg_distance_nm, 0.0)
        for wp in self.plan.waypoints[1:]:
            self.assertIsNotNone(wp.desired_track_deg)
            self.assertGreater(wp.leg_distance_nm, 0.0)

    def test_new_plan_starts_at_first_waypoint(self):
        self.assertEqual(self.plan.active_leg_index, 0)
        self.assertEqual([wp.active for wp in self.plan.waypoints].count(True), 1)
        self.assertTrue(self.plan.waypoints[0].active)
        self.assertIsNone(self.plan.from_waypoint)

    def test_set_active_waypoint(self):
        self.plan.set_active_waypoint(3)
        self.assertEqual(self.plan.active_leg_index, 3)
        active = [i for i, wp in enumerate(self.plan.waypoints) if wp.active]
        self.assertEqual(active, [3])
        self.assertEqual(self.plan.from_waypoint.identifier, "GIPVY")
        self.assertEqual(self.plan.to_waypoint.identifier, "JELCO")

    def test_set_active_waypoint_out_of_range(self):
        self.plan.set_active_waypoint(2)
        for bad in (-1, 8, 100):
            with self.assertRaises(OutOfRangeError):
                self.plan.set_active_waypoint(bad)
        self.assertEqual(self.plan.active_leg_index, 2)
        self.assertTrue(self.plan.waypoints[2].active)

    def test_replace_plan_recomputes_supplied_legs(self):
        plan = FlightPlan([
            Waypoint("AAA", 0.0, 0.0, desired_track_deg=123.0, leg_distance_nm=99.0),
            Waypoint("BBB", 0.0, 1.0, desired_track_deg=321.0, leg_distance_nm=5.0),
        ])
        self.assertIsNone(plan.waypoints[0].desired_track_deg)
        self.assertAlmostEqual(plan.waypoints[1].desired_track_deg, 90.0)
        self.assertAlmostEqual(plan.waypoints[1].leg_distance_nm, 60.04, places=2)
        self.assertEqual(plan.waypoints[1].ete, "30:01")

    def test_replace_plan_resets_active_and_direct_to(self):
        self.plan.set_active_waypoint(4)
        self.plan.activate_direct_to("KMRY")
        self.plan.replace_plan(equator_plan().waypoints)
        self.assertEqual(self.plan.active_leg_index, 0)
        self.assertIsNone(self.plan.direct_to)
        self.assertEqual(len(self.plan), 3)

    def test_rejected_plan_leaves_current_plan(self):
        self.plan.set_active_waypoint(2)
        bad_plans = [
            [],
            [Waypoint("AAA", 0, 0), Waypoint("AAA", 0, 1)],
            [Waypoint("AAA", 0, 0), Waypoint("BBB", 95, 0)],
            [Waypoint(" ", 0, 0)],
        ]
        for bad in bad_plans:
            with self.assertRaises(InvalidPlanError):
                self.plan.replace_plan(bad)
        self.assertEqual(len(self.plan), 8)
        self.assertEqual(self.plan.active_leg_index, 2)

    def test_direct_to_does_not_touch_sequence(self):
        self.plan.set_active_waypoint(2)
        target = self.plan.activate_direct_to("SISGY")
        self.assertEqual(target.identifier, "SISGY")
        self.assertEqual(self.plan.direct_to.identifier, "SISGY")
        self.assertEqual(self.plan.active_leg_index, 2)
        self.plan.cancel_direct_to()
        self.assertIsNone(self.plan.direct_to)

    def test_direct_to_unknown_identifier(self):
        with self.assertRaises(UnknownWaypointError):
            self.plan.activate_direct_to("NOPE")
        self.assertIsNone(self.plan.direct_to)

    def test_direct_to_off_plan_waypoint(self):
        target = self.plan.activate_direct_to(Waypoint("USR01", 36.7, -121.7, WaypointType.USER))
        self.assertEqual(target.identifier, "USR01")
        self.assertIsNone(self.plan.index_of("USR01"))

    def test_obs_course_is_normalized(self):
        self.plan.set_obs_mode(True)
        self.plan.set_obs_course(370)
        self.assertTrue(self.plan.obs_mode)
        self.assertAlmostEqual(self.plan.obs_course, 10.0)
        self.plan.set_obs_course(-90)
        self.assertAlmostEqual(self.plan.obs_course, 270.0)

    def test_remaining_distance_decreases_along_the_route(self):
        remaining = [self.plan.remaining_leg_distance_nm(i) for i in range(len(self.plan))]
        for earlier, later in zip(remaining, remaining[1:]):
            self.assertGreaterEqual(earlier, later)
        self.assertEqual(remaining[-1], 0.0)
        self.assertAlmostEqual(remaining[0], self.plan.total_distance_nm)

    def test_next_altitude_constraint(self):
        plan = equator_plan()
        self.assertEqual(plan.next_altitude_constraint(0)[0], 1)
        self.assertEqual(plan.next_altitude_constraint(1)[1].identifier, "CCC")
        self.assertIsNone(plan.next_altitude_constraint(2))


class TestLegEte(unittest.TestCase):
    def test_planning_speed(self):
        self.assertEqual(format_leg_ete(60.0), "30:00")
        self.assertEqual(format_leg_ete(2.0), "01:00")

    def test_zero_distance(self):
        self.assertEqual(format_leg_ete(0.0), "00:00")


if __name__ == '__main__':
    unittest.main()
