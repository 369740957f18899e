# simglass/runway/constants.py
from .data_models import RunwayCondition


class ContaminationFactors:
    """Multiplier applied to an aircraft's crosswind limit per runway surface condition"""
    FACTORS = {
        RunwayCondition.DRY: 1.0,
        RunwayCondition.WET: 0.85,
        RunwayCondition.SNOW: 0.65,
        RunwayCondition.ICE: 0.50,
    }


class RunwayConstants:
    APT_DAT_AIRPORT_CODES = {'1', '16', '17'}
    APT_DAT_LAND_RUNWAY = '100'

    # Used when a station has neither a live report nor a last-known one
    SIMULATED_WINDS = {
        "KMRY": (280, 12, 18),
        "KSNS": (310, 8, None),
        "KSJC": (300, 14, 22),
        "KSFO": (270, 18, 28),
        "KOAK": (290, 10, None),
        "KLAX": (250, 8, None),
        "KSAN": (270, 6, None),
        "KBUR": (260, 11, 16),
        "KONT": (260, 9, None),
    }

    # Built-in runway pairs for the demonstration airports (apt.dat fallback)
    BUILTIN_RUNWAYS = {
        "KMRY": [("10R", "28L"), ("10L", "28R")],
        "KSNS": [("08", "26"), ("14", "32")],
        "KSJC": [("12L", "30R"), ("12R", "30L")],
        "KSFO": [("28L", "10R"), ("28R", "10L"), ("01L", "19R"), ("01R", "19L")],
        "KOAK": [("12", "30"), ("10L", "28R"), ("10R", "28L")],
        "KLAX": [("06L", "24R"), ("06R", "24L"), ("07L", "25R"), ("07R", "25L")],
        "KSAN": [("09", "27")],
        "KBUR": [("08", "26"), ("15", "33")],
        "KONT": [("08L", "26R"), ("08R", "26L")],
    }
