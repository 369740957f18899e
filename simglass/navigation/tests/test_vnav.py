# simglass/navigation/tests/test_vnav.py
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

import pytest

from simglass.navigation.data_models import Waypoint
from simglass.navigation.exceptions import VnavError
from simglass.navigation.flight_plan import FlightPlan
from simglass.navigation.vnav import (
    VnavComputer,
    VnavSettings,
    classify_profile,
    constraint_vnav,
    descent_distance_nm,
    format_minutes,
    profile_vnav,
)


@pytest.fixture
def plan():
    return FlightPlan([
        Waypoint("AAA", 0.0, 0.0),
        Waypoint("BBB", 0.0, 1.0, altitude_ft=3000),
        Waypoint("CCC", 0.0, 2.0, altitude_ft=1000),
    ])


def test_descent_from_9000_to_3000_over_30_nm():
    result = profile_vnav(9000, 120, 30, VnavSettings(target_altitude_ft=3000, descent_angle_deg=3.0))
    assert result.distance_needed_nm == pytest.approx(18.8, abs=0.1)
    assert result.distance_to_tod_nm == pytest.approx(11.2, abs=0.1)
    assert result.time_to_tod == "5:35"
    assert result.required_vs_fpm == pytest.approx(-400.0)
    assert result.status == "above"


def test_offset_extends_distance_to_target():
    result = profile_vnav(9000, 120, 30, VnavSettings(target_altitude_ft=3000, offset_nm=5))
    assert result.distance_to_target_nm == 35
    assert result.distance_to_tod_nm == pytest.approx(16.2, abs=0.1)


def test_tod_is_never_negative():
    result = profile_vnav(9000, 120, 10, VnavSettings(target_altitude_ft=3000))
    assert result.distance_to_tod_nm == 0.0
    assert result.time_to_tod == "--:--"
    assert result.status == "descending"


def test_zero_groundspeed():
    result = profile_vnav(9000, 0, 30, VnavSettings(target_altitude_ft=3000))
    assert result.time_to_tod_min is None
    assert result.time_to_tod == "--:--"
    assert result.required_vs_fpm is None


@pytest.mark.parametrize("angle", [0, -3, 90, 120])
def test_invalid_descent_angle(angle):
    with pytest.raises(VnavError):
        descent_distance_nm(6000, angle)


@pytest.mark.parametrize("diff, tod, expected", [
    (50, 20, "at-target"),
    (-50, 20, "at-target"),
    (-500, 20, "below"),
    (6000, 0.2, "descending"),
    (6000, 2.0, "approaching"),
    (6000, 11.0, "above"),
])
def test_classify_profile(diff, tod, expected):
    assert classify_profile(diff, tod) == expected


def test_format_minutes():
    assert format_minutes(5.5) == "5:30"
    assert format_minutes(0) == "--:--"
    assert format_minutes(None) == "--:--"


def test_constraint_from_first_leg(plan):
    # AAA has no planned altitude, so the climb starts from 0
    result = constraint_vnav(plan)
    assert result.target_waypoint == "BBB"
    assert result.target_altitude_ft == 3000
    assert result.distance_to_constraint_nm == pytest.approx(60.04, abs=0.01)
    assert result.required_vs_fpm == 4997


def test_constraint_sums_legs_through_target(plan):
    plan.set_active_waypoint(1)
    result = constraint_vnav(plan)
    assert result.target_waypoint == "CCC"
    assert result.distance_to_constraint_nm == pytest.approx(120.08, abs=0.01)
    assert result.required_vs_fpm == -1666


def test_no_constraint_ahead(plan):
    plan.set_active_waypoint(2)
    result = constraint_vnav(plan)
    assert result.target_waypoint is None
    assert result.required_vs_fpm is None


def test_colocated_constraint_has_no_vertical_speed():
    plan = FlightPlan([Waypoint("AAA", 0.0, 0.0), Waypoint("BBB", 0.0, 0.0, altitude_ft=2000)])
    result = constraint_vnav(plan)
    assert result.distance_to_constraint_nm == 0.0
    assert result.required_vs_fpm is None


def test_computer_keeps_both_results(plan):
    computer = VnavComputer(plan, VnavSettings(target_altitude_ft=1000))
    assert computer.constraint().target_waypoint == "BBB"
    assert computer.profile(4000, 120, 60).status == "above"
    computer.settings.enabled = False
    assert computer.profile(4000, 120, 60) is None


def test_constraint_starts_from_planned_altitude_of_active_waypoint():
    plan = FlightPlan([
        Waypoint("AAA", 0.0, 0.0, altitude_ft=1000),
        Waypoint("BBB", 0.0, 1.0, altitude_ft=3000),
    ])
    assert constraint_vnav(plan).required_vs_fpm == 3331
    assert VnavComputer(plan).constraint() == constraint_vnav(plan)


def test_constraint_at_same_altitude_needs_no_vertical_speed():
    plan = FlightPlan([
        Waypoint("AAA", 0.0, 0.0, altitude_ft=3000),
        Waypoint("BBB", 0.0, 1.0, altitude_ft=3000),
    ])
    assert constraint_vnav(plan).required_vs_fpm == 0
