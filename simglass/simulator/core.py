# simglass/simulator/core.py

# Standard Libraries
import logging
import math
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

# Third-Party Libraries
import numpy as np

# Local Imports
from .config import SimulatorConfig
from .exceptions import SimulationSetupError
from ..airplane.data_models import FuelState
from ..airplane.systems.fuel import format_endurance, endurance_hours
from ..navigation.data_models import AircraftState, Waypoint
from ..navigation.utils.coordinates import calculate_bearing, interpolate_position
from ..runway.data_models import WeatherReport, WindObservation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationContext:
    """Where the synthetic aircraft is along the route. Passed in and returned by every tick."""
    leg_index: int = SimulatorConfig.START_LEG_INDEX
    leg_progress: float = 0.0
    finished: bool = False


class FlightProgressSimulator:
    """
    Moves a synthetic aircraft along the flight plan, one leg at a time,
    with plausible speed/altitude/vertical-speed noise.

    The random source is injected so a seeded Generator replays the same
    flight. The simulator keeps no per-flight state of its own.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.config = SimulatorConfig()

    @staticmethod
    def start() -> SimulationContext:
        return SimulationContext()

    def tick(self, context: SimulationContext,
             waypoints: Sequence[Waypoint]) -> Tuple[SimulationContext, AircraftState]:
        """Advances one tick and returns the new context and aircraft state."""
        if len(waypoints) < 2:
            raise SimulationSetupError(f"Synthetic flight needs at least 2 waypoints, got {len(waypoints)}")

        cfg = self.config
        last_index = len(waypoints) - 1
        # The plan may have been replaced by a shorter one since the last tick
        leg_index = min(max(context.leg_index, 1), last_index)

        if context.finished:
            context = replace(context, leg_index=last_index, leg_progress=1.0)
            return context, self._parked_state(waypoints[-1])

        progress = context.leg_progress + cfg.PROGRESS_STEP_BASE + self.rng.random() * cfg.PROGRESS_STEP_SPREAD
        if progress >= 1.0:
            if leg_index >= last_index:
                logger.info(f"Synthetic flight arrived at {waypoints[-1].identifier}")
                context = SimulationContext(leg_index=last_index, leg_progress=1.0, finished=True)
                return context, self._parked_state(waypoints[-1])
            leg_index += 1
            progress = 0.0

        context = SimulationContext(leg_index=leg_index, leg_progress=progress)
        return context, self._flying_state(waypoints[leg_index - 1], waypoints[leg_index], leg_index, progress)

    def _flying_state(self, from_wp: Waypoint, to_wp: Waypoint,
                      leg_index: int, progress: float) -> AircraftState:
        cfg = self.config
        rng = self.rng
        lat, lon = interpolate_position(from_wp.lat, from_wp.lon, to_wp.lat, to_wp.lon, progress)

        groundspeed = cfg.BASE_GROUNDSPEED_KTS + math.floor(rng.random() * cfg.GROUNDSPEED_SPREAD_KTS
                                                           - cfg.GROUNDSPEED_SPREAD_KTS / 2)
        airspeed = groundspeed - cfg.IAS_OFFSET_KTS + math.floor(rng.random() * cfg.IAS_SPREAD_KTS)

        if progress < cfg.TRANSITION_PROGRESS:
            vertical_speed = math.floor(rng.random() * cfg.TRANSITION_VS_MAX_FPM)
        else:
            vertical_speed = math.floor(rng.random() * cfg.LEVEL_VS_SPREAD_FPM - cfg.LEVEL_VS_SPREAD_FPM / 2)

        altitude = math.floor(rng.random() * cfg.ALTITUDE_JITTER_FT - cfg.ALTITUDE_JITTER_FT / 2)
        if leg_index <= cfg.CRUISE_LEG:
            altitude += cfg.ALTITUDE_BASE_FT + leg_index * cfg.ALTITUDE_STEP_FT
        else:
            altitude += cfg.CRUISE_ALTITUDE_FT

        return AircraftState(
            lat=lat,
            lon=lon,
            altitude_ft=altitude,
            airspeed_kts=airspeed,
            groundspeed_kts=groundspeed,
            heading_deg=round(calculate_bearing(from_wp.lat, from_wp.lon, to_wp.lat, to_wp.lon)),
            vertical_speed_fpm=vertical_speed,
            mach=round(groundspeed / cfg.SPEED_OF_SOUND_KTS, 2),
        )

    def _parked_state(self, destination: Waypoint) -> AircraftState:
        return AircraftState(
            lat=destination.lat,
            lon=destination.lon,
            altitude_ft=destination.altitude_ft if destination.altitude_ft is not None else 0.0,
        )

    def initial_fuel(self) -> FuelState:
        cfg = self.config
        current, flow = cfg.DEMO_FUEL_LBS, cfg.DEMO_FUEL_FLOW_PPH
        return FuelState(
            current_lbs=current,
            max_lbs=cfg.DEMO_FUEL_CAPACITY_LBS,
            flow_pph=flow,
            endurance=format_endurance(endurance_hours(current, flow)),
        )

    def initial_weather(self) -> WeatherReport:
        cfg = self.config
        return WeatherReport(
            station=cfg.DEMO_WIND_STATION,
            wind=WindObservation(direction_deg=cfg.DEMO_WIND_DIRECTION_DEG, speed_kts=cfg.DEMO_WIND_SPEED_KTS),
            source="simulated",
        )
