# simglass/simulator/config.py

class SimulatorConfig:
    """Configuration for the synthetic flight-progress source."""

    TICK_INTERVAL_SEC = 0.5

    # Leg progress per tick: base plus up to SPREAD of uniform noise
    PROGRESS_STEP_BASE = 0.005
    PROGRESS_STEP_SPREAD = 0.003
    START_LEG_INDEX = 1

    # Ground speed 120 kt +/- 5, IAS 10 kt below with up to 5 kt noise
    BASE_GROUNDSPEED_KTS = 120
    GROUNDSPEED_SPREAD_KTS = 10
    IAS_OFFSET_KTS = 10
    IAS_SPREAD_KTS = 6

    # Altitude profile: climb by ALTITUDE_STEP_FT per leg up to CRUISE_LEG, then cruise
    ALTITUDE_BASE_FT = 1500
    ALTITUDE_STEP_FT = 750
    CRUISE_LEG = 2
    CRUISE_ALTITUDE_FT = 3000
    ALTITUDE_JITTER_FT = 50

    # Climb burst just after a leg transition, level-flight wobble otherwise
    TRANSITION_PROGRESS = 0.1
    TRANSITION_VS_MAX_FPM = 300
    LEVEL_VS_SPREAD_FPM = 60

    SPEED_OF_SOUND_KTS = 661

    # Demonstration fuel load and wind seeded when the synthetic source starts
    DEMO_FUEL_LBS = 8200.0
    DEMO_FUEL_CAPACITY_LBS = 12000.0
    DEMO_FUEL_FLOW_PPH = 1800.0
    DEMO_WIND_STATION = "KMRY"
    DEMO_WIND_DIRECTION_DEG = 310
    DEMO_WIND_SPEED_KTS = 12
