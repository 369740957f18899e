"""simglass/constants/flightgear.py"""

class FGProps:
    #------------------------------------------------------------------------------
    # PROPERTIES READ BY THE EXTERNAL TELEMETRY SOURCE
    #------------------------------------------------------------------------------

    #--------------------------
    # FUEL SYSTEM
    #--------------------------
    class FUEL:
        TOTAL_GAL = "/consumables/fuel/total-fuel-gal_us"
        CAPACITY_GAL = "/consumables/fuel/total-fuel-capacity-gal_us"
        FLOW_GPH = "/engines/engine/fuel-flow-gph"

    #--------------------------
    # ENVIRONMENTAL
    #--------------------------
    class ENVIRONMENT:
        WIND_FROM_DEG = "/environment/wind-from-heading-deg"
        WIND_SPEED_KT = "/environment/wind-speed-kt"

    #--------------------------
    # FLIGHT STATE
    #--------------------------
    class FLIGHT:
        # Position
        LATITUDE = "/position/latitude-deg"
        LONGITUDE = "/position/longitude-deg"
        ALTITUDE_FT = "/instrumentation/altimeter/indicated-altitude-ft"

        # Attitude
        HEADING_DEG = "/orientation/heading-deg"

        # Motion
        AIRSPEED_KT = "/velocities/airspeed-kt"
        GROUNDSPEED_KT = "/velocities/groundspeed-kt"
        VERTICAL_SPEED_FPS = "/velocities/vertical-speed-fps"
        MACH = "/velocities/mach"
