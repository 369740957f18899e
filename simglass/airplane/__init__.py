# simglass/airplane/__init__.py

"""
airplane - Aircraft performance profiles, fuel modelling and the
FlightGear-backed aircraft systems
"""

# Local Imports
from .core import ExternalAircraft, default_profile, get_profile
from .data_models import AircraftPerformanceProfile, DestinationFuel, FuelState
from .exceptions import (
    AircraftException,
    FlightSystemException,
    FuelSystemException,
    UnknownAircraftError,
)

__all__ = [
    'ExternalAircraft',
    'default_profile',
    'get_profile',
    'AircraftPerformanceProfile',
    'DestinationFuel',
    'FuelState',
    'AircraftException',
    'FlightSystemException',
    'FuelSystemException',
    'UnknownAircraftError',
]
