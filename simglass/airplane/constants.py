# simglass/airplane/constants.py
from ..constants.connection import FGConnectionConstants
from ..constants.flightgear import FGProps
from .data_models import AircraftPerformanceProfile


class FuelConstants:
    """Fuel planning and display thresholds"""

    # Jet-A style density used by the external bridge conversion
    DENSITY_LBS_PER_GAL = 6.7

    # 45 minutes of fuel at the current flow must remain at the destination
    RESERVE_HOURS = 0.75

    # Percent of capacity
    LOW_FUEL_PERCENT = 20.0
    CRITICAL_FUEL_PERCENT = 10.0

    ENDURANCE_UNKNOWN = "--:--"

    # ===== REUSED CONSTANTS =====
    CONNECTION = FGConnectionConstants
    PROPERTIES = FGProps


class AircraftProfiles:
    """Selectable aircraft types and their demonstrated crosswind components"""

    DEFAULT_AIRCRAFT = "c172"

    TABLE = {
        profile.aircraft_id: profile for profile in (
            AircraftPerformanceProfile("c172", "Cessna 172 Skyhawk", "C172", 15, 12, "SE"),
            AircraftPerformanceProfile("c182", "Cessna 182 Skylane", "C182", 15, 12, "SE"),
            AircraftPerformanceProfile("c152", "Cessna 152", "C152", 12, 9, "SE"),
            AircraftPerformanceProfile("pa28", "Piper PA-28 Cherokee", "PA28", 17, 14, "SE"),
            AircraftPerformanceProfile("sr22", "Cirrus SR22", "SR22", 20, 16, "SE"),
            AircraftPerformanceProfile("be36", "Beechcraft Bonanza A36", "BE36", 17, 14, "SE"),
            AircraftPerformanceProfile("da40", "Diamond DA40", "DA40", 20, 16, "SE"),
            AircraftPerformanceProfile("be58", "Beechcraft Baron 58", "BE58", 22, 18, "ME"),
            AircraftPerformanceProfile("pa44", "Piper PA-44 Seminole", "PA44", 17, 14, "ME"),
            AircraftPerformanceProfile("c525", "Cessna Citation CJ2", "C525", 25, 20, "JET"),
        )
    }
