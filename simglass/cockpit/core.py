# simglass/cockpit/core.py
"""
The avionics session: owns the flight plan, the active telemetry source and
the latest derived readout.

Only one telemetry source runs at a time. Switching sources discards every
derived value so nothing computed from the old source leaks into the new one.
Each tick rebuilds the readout from scratch from the current telemetry.
"""
import logging
import threading
from dataclasses import dataclass, fields, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Union

from ..airplane.core import ExternalAircraft
from ..airplane.data_models import DestinationFuel, FuelState
from ..airplane.exceptions import AircraftException
from ..airplane.systems.fuel import burn, fuel_status, plan_destination, range_nm
from ..fg_interface.core import FGConnection
from ..fg_interface.exceptions import FGCommError
from ..navigation.constants import TripConstants
from ..navigation.core import NavigationComputer, empty_snapshot
from ..navigation.data_models import (
    AircraftState,
    NavigationSnapshot,
    TripPlan,
    VnavConstraintResult,
    VnavProfileResult,
    Waypoint,
)
from ..navigation.exceptions import VnavError
from ..navigation.flight_plan import FlightPlan
from ..navigation.trip import select_groundspeed, trip_plan
from ..navigation.vnav import VnavComputer, VnavSettings
from ..runway.data_models import WeatherReport, WindObservation
from ..simulator.core import FlightProgressSimulator, SimulationContext
from ..simulator.exceptions import SimulationSetupError

logger = logging.getLogger(__name__)

# AircraftState fields the external bridge is allowed to overwrite
BRIDGE_FIELDS = (
    'lat', 'lon', 'altitude_ft', 'airspeed_kts', 'groundspeed_kts',
    'heading_deg', 'vertical_speed_fpm', 'mach',
)


class TelemetrySource(Enum):
    NONE = "none"
    SYNTHETIC = "synthetic"
    EXTERNAL = "external"


@dataclass(frozen=True)
class CockpitReadout:
    """Everything the instruments display after one update."""
    source: TelemetrySource
    aircraft: Optional[AircraftState]
    navigation: NavigationSnapshot
    fuel: Optional[FuelState]
    fuel_status: Optional[Dict[str, Any]]
    range_nm: float
    destination_fuel: DestinationFuel
    vnav_constraint: Optional[VnavConstraintResult]
    vnav_profile: Optional[VnavProfileResult]
    weather: Optional[WeatherReport]
    degraded: bool
    updated_at: datetime


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AvionicsSession:
    """Host-driven session: call tick() on a fixed interval, read .readout."""

    def __init__(self, flight_plan: Optional[FlightPlan] = None,
                 simulator: Optional[FlightProgressSimulator] = None,
                 fg_connection: Optional[FGConnection] = None,
                 vnav_settings: Optional[VnavSettings] = None):
        self.flight_plan = flight_plan or FlightPlan.demo()
        self.simulator = simulator or FlightProgressSimulator()
        self.fg = fg_connection or FGConnection()
        self.external = ExternalAircraft(self.fg)
        self.navigation = NavigationComputer(self.flight_plan)
        self.vnav = VnavComputer(self.flight_plan, vnav_settings)

        self._lock = threading.RLock()
        self.source = TelemetrySource.NONE
        self.running = True
        self._reset_derived(_utcnow())

    # ------------------------------------------------------------------
    # Source management
    # ------------------------------------------------------------------
    def _reset_derived(self, now: datetime) -> None:
        self.aircraft: Optional[AircraftState] = None
        self.fuel: Optional[FuelState] = None
        self.weather: Optional[WeatherReport] = None
        self.context: Optional[SimulationContext] = None
        self.degraded = False
        # Anything observed or requested before this instant belongs to an older source
        self._last_external_at = now
        self._last_weather_at = now
        self.readout = self._idle_readout(now)

    def set_source(self, source: TelemetrySource, now: Optional[datetime] = None) -> None:
        now = now or _utcnow()
        with self._lock:
            if self.source is TelemetrySource.EXTERNAL and source is not TelemetrySource.EXTERNAL:
                self.fg.disconnect()
            self.source = source
            self._reset_derived(now)
            self.running = True

            if source is TelemetrySource.SYNTHETIC:
                self._restart_simulation()
                self.fuel = self.simulator.initial_fuel()
                self.weather = self.simulator.initial_weather()
            elif source is TelemetrySource.EXTERNAL and not self.fg.is_connected:
                response = self.fg.connect()
                self.degraded = not response['success']
            logger.info(f"Telemetry source set to {source.value}")

    def _restart_simulation(self) -> None:
        self.context = self.simulator.start()
        if len(self.flight_plan) > self.context.leg_index:
            self.flight_plan.set_active_waypoint(self.context.leg_index)

    def stop(self) -> None:
        """Stops ticking and releases the bridge."""
        with self._lock:
            self.running = False
            self.fg.disconnect()
            logger.info("Avionics session stopped")

    # ------------------------------------------------------------------
    # Plan changes
    # ------------------------------------------------------------------
    def load_plan(self, waypoints: Iterable[Waypoint], now: Optional[datetime] = None) -> None:
        """Replaces the plan. A rejected plan raises and leaves everything unchanged."""
        with self._lock:
            self.flight_plan.replace_plan(waypoints)
            if self.source is TelemetrySource.SYNTHETIC:
                self._restart_simulation()
            self._recompute(now or _utcnow())

    def activate_leg(self, index: int, now: Optional[datetime] = None) -> None:
        with self._lock:
            self.flight_plan.set_active_waypoint(index)
            if self.source is TelemetrySource.SYNTHETIC:
                self.context = SimulationContext(leg_index=max(1, index))
            self._recompute(now or _utcnow())

    def direct_to(self, target: Union[str, Waypoint], now: Optional[datetime] = None) -> Waypoint:
        with self._lock:
            resolved = self.flight_plan.activate_direct_to(target)
            self._recompute(now or _utcnow())
            return resolved

    def cancel_direct_to(self, now: Optional[datetime] = None) -> None:
        with self._lock:
            self.flight_plan.cancel_direct_to()
            self._recompute(now or _utcnow())

    def set_obs(self, active: Optional[bool] = None, course: Optional[float] = None,
                now: Optional[datetime] = None) -> None:
        """Changes OBS mode and/or course. The course is validated before anything is applied."""
        with self._lock:
            if course is not None:
                course = float(course)
            if active is not None:
                self.flight_plan.set_obs_mode(active)
            if course is not None:
                self.flight_plan.set_obs_course(course)
            self._recompute(now or _utcnow())

    def update_vnav_settings(self, now: Optional[datetime] = None, **changes: Any) -> VnavSettings:
        """
        Applies target_altitude_ft, descent_angle_deg, offset_nm and enabled
        together. Any invalid value raises VnavError and nothing is applied.
        """
        with self._lock:
            settings = self.vnav.settings
            unknown = set(changes) - {f.name for f in fields(VnavSettings)}
            if unknown:
                raise VnavError(f"Unknown VNAV setting(s): {', '.join(sorted(unknown))}")
            try:
                updated = replace(settings, **{
                    name: bool(value) if name == 'enabled' else float(value)
                    for name, value in changes.items()
                })
            except (TypeError, ValueError) as e:
                raise VnavError(f"Invalid VNAV setting: {e}") from e
            if not 0 < updated.descent_angle_deg < 90:
                raise VnavError(f"Descent angle must be between 0 and 90 degrees, got {updated.descent_angle_deg}")

            self.vnav.settings = updated
            self._recompute(now or _utcnow())
            return updated

    def trip(self, manual_groundspeed_kts: float = TripConstants.DEFAULT_MANUAL_GROUNDSPEED_KTS,
             use_sensor: bool = True, now: Optional[datetime] = None) -> TripPlan:
        with self._lock:
            sensor = self.aircraft.groundspeed_kts if self.aircraft is not None else None
            groundspeed = select_groundspeed(sensor, manual_groundspeed_kts, use_sensor)
            return trip_plan(self.flight_plan, groundspeed, now)

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------
    def tick(self, elapsed_seconds: float, now: Optional[datetime] = None) -> CockpitReadout:
        now = now or _utcnow()
        with self._lock:
            if not self.running:
                return self.readout
            if self.source is TelemetrySource.SYNTHETIC:
                self._tick_synthetic(elapsed_seconds)
            elif self.source is TelemetrySource.EXTERNAL:
                self._tick_external(now)
            return self._recompute(now)

    def _tick_synthetic(self, elapsed_seconds: float) -> None:
        was_finished = self.context.finished
        try:
            self.context, self.aircraft = self.simulator.tick(self.context, self.flight_plan.waypoints)
        except SimulationSetupError as e:
            logger.warning(f"Synthetic telemetry paused: {e}")
            self.degraded = True
            return
        self.degraded = False
        if self.context.leg_index != self.flight_plan.active_leg_index:
            self.flight_plan.set_active_waypoint(self.context.leg_index)
        if not was_finished:
            self.fuel = burn(self.fuel, elapsed_seconds)

    def _tick_external(self, now: datetime) -> None:
        if not self.fg.is_connected:
            self.degraded = True
            return
        try:
            telemetry = self.external.get_telemetry()
        except (AircraftException, FGCommError) as e:
            logger.warning(f"External telemetry read failed, keeping last known state: {e}")
            self.degraded = True
            return
        self.degraded = False
        self.merge_external(telemetry['flight'], now)
        self.fuel = telemetry['fuel']
        wind = telemetry['wind']
        station = self.flight_plan.waypoints[-1].identifier
        self.apply_weather(WeatherReport(
            station=station,
            wind=WindObservation(direction_deg=wind['direction_deg'], speed_kts=wind['speed_kts']),
            source="external",
            observed_at=now,
        ), now)

    def merge_external(self, fields: Dict[str, Any], observed_at: datetime) -> bool:
        """
        Merges bridge-owned fields into the aircraft state.

        Returns False (and changes nothing) when the result is older than the
        last applied update or the external source is no longer selected.
        """
        with self._lock:
            if self.source is not TelemetrySource.EXTERNAL:
                logger.debug("Dropped external telemetry: source no longer external")
                return False
            if observed_at < self._last_external_at:
                logger.debug(f"Dropped stale external telemetry from {observed_at.isoformat()}")
                return False

            owned = {k: float(v) for k, v in fields.items() if k in BRIDGE_FIELDS and v is not None}
            if self.aircraft is None:
                if 'lat' not in owned or 'lon' not in owned:
                    return False
                self.aircraft = AircraftState(**owned)
            else:
                self.aircraft = replace(self.aircraft, **owned)
            self._last_external_at = observed_at
            return True

    def apply_weather(self, report: WeatherReport, requested_at: datetime) -> bool:
        """Stores a wind report unless a newer request has already been applied."""
        with self._lock:
            if requested_at < self._last_weather_at:
                logger.debug(f"Dropped stale weather for {report.station}")
                return False
            self.weather = report
            self._last_weather_at = requested_at
            return True

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------
    def _idle_readout(self, now: datetime) -> CockpitReadout:
        return CockpitReadout(
            source=self.source,
            aircraft=None,
            navigation=empty_snapshot(),
            fuel=None,
            fuel_status=None,
            range_nm=0.0,
            destination_fuel=DestinationFuel(None, None, None),
            vnav_constraint=None,
            vnav_profile=None,
            weather=None,
            degraded=self.degraded,
            updated_at=now,
        )

    def _recompute(self, now: datetime) -> CockpitReadout:
        if self.aircraft is None:
            self.readout = replace(self._idle_readout(now), fuel=self.fuel, weather=self.weather,
                                   fuel_status=fuel_status(self.fuel) if self.fuel else None)
            return self.readout

        aircraft = self.aircraft
        snapshot = self.navigation.compute(aircraft, now)
        destination_fuel = DestinationFuel(None, None, None)
        fuel_range = 0.0
        if self.fuel is not None:
            destination_fuel = plan_destination(self.fuel, snapshot.distance_remaining_nm,
                                                aircraft.groundspeed_kts)
            fuel_range = range_nm(self.fuel, aircraft.groundspeed_kts)

        self.readout = CockpitReadout(
            source=self.source,
            aircraft=aircraft,
            navigation=snapshot,
            fuel=self.fuel,
            fuel_status=fuel_status(self.fuel) if self.fuel else None,
            range_nm=fuel_range,
            destination_fuel=destination_fuel,
            vnav_constraint=self.vnav.constraint(),
            vnav_profile=self.vnav.profile(aircraft.altitude_ft, aircraft.groundspeed_kts,
                                           snapshot.distance_remaining_nm),
            weather=self.weather,
            degraded=self.degraded,
            updated_at=now,
        )
        return self.readout
