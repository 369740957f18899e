# simglass/navigation/constants.py

class NavConstants:
    EARTH_RADIUS_NM: float = 3440.065
    FEET_PER_NAUTICAL_MILE: float = 6076.12

    # Leg ETE in the plan table is estimated at a fixed planning speed
    PLANNING_GROUNDSPEED_KTS: float = 120.0

    # Display rounding and placeholders
    DISTANCE_DISPLAY_DECIMALS = 1
    NO_WAYPOINT = "---"
    ETA_UNKNOWN = "--:-- UTC"
    TIME_UNKNOWN = "--:--"

    # Points closer than this are treated as co-located when picking a course
    COLOCATED_TOLERANCE_NM: float = 1e-6


class VnavConstants:
    AT_TARGET_BAND_FT = 100
    DESCENDING_TOD_NM = 0.5
    APPROACHING_TOD_NM = 3.0
    # Constraint VS is a distance-normalized heuristic, not groundspeed-calibrated
    CONSTRAINT_VS_SCALE = 100

    DEFAULT_TARGET_ALT_FT = 3000
    DEFAULT_DESCENT_ANGLE_DEG = 3.0
    DEFAULT_OFFSET_NM = 0.0


class TripConstants:
    DEFAULT_MANUAL_GROUNDSPEED_KTS = 120
    MIN_MANUAL_GROUNDSPEED_KTS = 50
    MAX_MANUAL_GROUNDSPEED_KTS = 500
    # En-route safe altitude clears the highest planned waypoint by this much
    ESA_MARGIN_FT = 1000
