# simglass/runway/core.py
"""
Wind components, preferred runway ends and crosswind-limit classification.

Convention: the wind direction is where the wind blows FROM. A positive
crosswind comes from the right of the runway heading, a positive headwind
blows down the runway toward the aircraft.
"""
import logging
import math
from typing import Dict, List, Optional, Tuple

from ..airplane.core import default_profile
from ..airplane.data_models import AircraftPerformanceProfile
from .constants import ContaminationFactors
from .data_models import (
    CrosswindAssessment,
    CrosswindStatus,
    Runway,
    RunwayCondition,
    RunwayEnd,
    WindObservation,
)
from .exceptions import InvalidRunwayError


def round_half_up(value: float) -> int:
    """Rounds .5 toward positive infinity, as cockpit displays do."""
    return int(math.floor(value + 0.5))


def wind_components(wind_direction_deg: Optional[float], wind_speed_kts: float,
                    runway_heading_deg: float) -> Tuple[int, int]:
    """Returns (headwind, crosswind) in whole knots."""
    if wind_direction_deg is None:
        # Variable wind: assume the whole speed can arrive across the runway
        return 0, round_half_up(wind_speed_kts)
    angle = math.radians(wind_direction_deg - runway_heading_deg)
    return (round_half_up(wind_speed_kts * math.cos(angle)),
            round_half_up(wind_speed_kts * math.sin(angle)))


def preferred_end(runway: Runway, wind_direction_deg: Optional[float]) -> RunwayEnd:
    """The end facing most into the wind. Ties, and variable wind, pick the first listed end."""
    first, second = runway.ends
    if wind_direction_deg is None:
        return first
    hw_first = math.cos(math.radians(wind_direction_deg - first.heading))
    hw_second = math.cos(math.radians(wind_direction_deg - second.heading))
    return first if hw_first >= hw_second else second


def effective_limits(profile: AircraftPerformanceProfile,
                     condition: RunwayCondition) -> Tuple[int, int]:
    """(limit, caution) scaled by the surface contamination factor."""
    factor = ContaminationFactors.FACTORS[condition]
    return (round_half_up(profile.crosswind_limit_kt * factor),
            round_half_up(profile.crosswind_caution_kt * factor))


def classify_crosswind(steady_kt: float, gust_kt: Optional[float],
                       limit_kt: float, caution_kt: float) -> CrosswindStatus:
    """Evaluates the larger of the steady and gust crosswind magnitudes."""
    worst = abs(steady_kt)
    if gust_kt is not None:
        worst = max(worst, abs(gust_kt))
    if worst > limit_kt:
        return CrosswindStatus.EXCEEDED
    if worst > caution_kt:
        return CrosswindStatus.CAUTION
    return CrosswindStatus.NOMINAL


def assess_runway(runway: Runway, wind: WindObservation,
                  profile: AircraftPerformanceProfile) -> CrosswindAssessment:
    if len(runway.ends) != 2:
        raise InvalidRunwayError(f"Runway {runway.runway_id} must have exactly two ends")

    end = preferred_end(runway, wind.direction_deg)
    headwind, crosswind = wind_components(wind.direction_deg, wind.speed_kts, end.heading)
    gust_crosswind = None
    if wind.gust_kts is not None:
        _, gust_crosswind = wind_components(wind.direction_deg, wind.gust_kts, end.heading)

    limit, caution = effective_limits(profile, runway.condition)
    return CrosswindAssessment(
        runway_id=runway.runway_id,
        end=end.designator,
        crosswind_kt=crosswind,
        gust_crosswind_kt=gust_crosswind,
        headwind_kt=headwind,
        effective_limit_kt=limit,
        effective_caution_kt=caution,
        condition=runway.condition,
        status=classify_crosswind(crosswind, gust_crosswind, limit, caution),
    )


def assess_airport(runways: List[Runway], wind: WindObservation,
                   profile: AircraftPerformanceProfile) -> List[CrosswindAssessment]:
    """One assessment per physical runway, for its preferred end."""
    return [assess_runway(runway, wind, profile) for runway in runways]


class WindComponentResolver:
    """
    Evaluates every runway at an airport against the selected aircraft and the
    pilot-entered surface conditions.
    """

    def __init__(self, runway_source, profile: Optional[AircraftPerformanceProfile] = None):
        """
        Args:
            runway_source: object with get_runways(icao) -> List[Runway]
            profile: aircraft performance profile; defaults to the C172
        """
        self.runway_source = runway_source
        self.profile = profile or default_profile()
        self._conditions: Dict[Tuple[str, str], RunwayCondition] = {}

    def set_profile(self, profile: AircraftPerformanceProfile) -> None:
        self.profile = profile
        logging.info(f"Crosswind limits now for {profile.name}")

    def set_condition(self, icao: str, runway_id: str, condition: RunwayCondition) -> None:
        self._conditions[(icao.upper(), runway_id)] = condition

    def condition_for(self, icao: str, runway_id: str) -> RunwayCondition:
        return self._conditions.get((icao.upper(), runway_id), RunwayCondition.DRY)

    def assess(self, icao: str, wind: WindObservation) -> List[CrosswindAssessment]:
        runways = [
            Runway(runway_id=rw.runway_id, ends=rw.ends, surface=rw.surface,
                   condition=self.condition_for(icao, rw.runway_id))
            for rw in self.runway_source.get_runways(icao)
        ]
        return assess_airport(runways, wind, self.profile)
