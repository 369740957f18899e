# simglass/navigation/utils/__init__.py
"""
Geodetic helpers shared by the plan model, the navigation computer and the
simulator.
"""
from .coordinates import (
    haversine_distance_nm,
    calculate_bearing,
    interpolate_position,
)
