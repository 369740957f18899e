# simglass/runway/tests/test_wind_components.py
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

import math
from unittest.mock import MagicMock

import pytest

from simglass.airplane.core import get_profile
from simglass.runway.core import (
    WindComponentResolver,
    assess_airport,
    assess_runway,
    classify_crosswind,
    effective_limits,
    preferred_end,
    round_half_up,
    wind_components,
)
from simglass.runway.data_models import CrosswindStatus, Runway, RunwayCondition, RunwayEnd, WindObservation
from simglass.runway.runway_loader import builtin_runways

C172 = get_profile("c172")


def test_wind_270_at_20_on_runway_280():
    headwind, crosswind = wind_components(270, 20, 280)
    assert headwind == 20
    assert abs(crosswind) == 3
    # Wind from the left of the runway heading
    assert crosswind < 0


def test_wind_from_the_right_is_positive():
    _, crosswind = wind_components(300, 10, 270)
    assert crosswind > 0


@pytest.mark.parametrize("direction", [0, 35, 90, 145, 200, 275, 330])
def test_components_preserve_wind_speed(direction):
    headwind, crosswind = wind_components(direction, 25, 140)
    assert math.hypot(headwind, crosswind) == pytest.approx(25, abs=1.0)


def test_variable_wind_counts_as_full_crosswind():
    assert wind_components(None, 10, 280) == (0, 10)


def test_round_half_up():
    assert round_half_up(7.5) == 8
    assert round_half_up(8.5) == 9
    assert round_half_up(-3.5) == -3


def test_preferred_end_faces_the_wind():
    runway = Runway("10R/28L", (RunwayEnd("10R"), RunwayEnd("28L")))
    assert preferred_end(runway, 280).designator == "28L"
    assert preferred_end(runway, 120).designator == "10R"
    # Exactly across the runway: first listed end
    assert preferred_end(runway, 190).designator == "10R"


def test_designator_heading():
    assert RunwayEnd("28L").heading == 280.0
    assert RunwayEnd("08").heading == 80.0
    assert RunwayEnd("36").heading == 0.0
    assert RunwayEnd("28L", heading_deg=283.4).heading == 283.4


def test_contamination_scales_limits():
    assert effective_limits(C172, RunwayCondition.DRY) == (15, 12)
    assert effective_limits(C172, RunwayCondition.WET) == (13, 10)
    assert effective_limits(C172, RunwayCondition.ICE) == (8, 6)
    for condition in RunwayCondition:
        limit, _ = effective_limits(C172, condition)
        assert limit <= effective_limits(C172, RunwayCondition.DRY)[0]


@pytest.mark.parametrize("steady, gust, expected", [
    (10, 16, CrosswindStatus.EXCEEDED),
    (16, None, CrosswindStatus.EXCEEDED),
    (-16, None, CrosswindStatus.EXCEEDED),
    (13, None, CrosswindStatus.CAUTION),
    (10, 14, CrosswindStatus.CAUTION),
    (12, None, CrosswindStatus.NOMINAL),
    (15, 15, CrosswindStatus.CAUTION),
])
def test_classification_uses_worst_component(steady, gust, expected):
    assert classify_crosswind(steady, gust, 15, 12) is expected


def test_assess_salinas_light_wind():
    results = assess_airport(builtin_runways("KSNS"), WindObservation(310, 8), C172)
    by_runway = {a.runway_id: a for a in results}
    assert by_runway["08/26"].end == "26"
    assert by_runway["08/26"].crosswind_kt == 6
    assert by_runway["14/32"].end == "32"
    assert by_runway["14/32"].crosswind_kt == -1
    assert all(a.status is CrosswindStatus.NOMINAL for a in results)


def test_assess_strong_crosswind_with_gust():
    runway = Runway("08/26", (RunwayEnd("08"), RunwayEnd("26")))
    assessment = assess_runway(runway, WindObservation(360, 25, 32), C172)
    assert assessment.end == "08"
    assert assessment.crosswind_kt == -25
    assert assessment.gust_crosswind_kt == -32
    assert assessment.exceeded
    assert not assessment.caution


def test_resolver_applies_conditions_per_runway():
    source = MagicMock()
    source.get_runways.return_value = builtin_runways("KMRY")
    resolver = WindComponentResolver(source, C172)

    wind = WindObservation(190, 11)
    dry = {a.runway_id: a for a in resolver.assess("KMRY", wind)}
    assert dry["10R/28L"].status is CrosswindStatus.NOMINAL

    resolver.set_condition("kmry", "10R/28L", RunwayCondition.ICE)
    icy = {a.runway_id: a for a in resolver.assess("KMRY", wind)}
    assert icy["10R/28L"].condition is RunwayCondition.ICE
    assert icy["10R/28L"].status is CrosswindStatus.EXCEEDED
    assert icy["10L/28R"].condition is RunwayCondition.DRY

    resolver.set_profile(get_profile("c525"))
    assert resolver.assess("KMRY", wind)[1].effective_limit_kt == 25
