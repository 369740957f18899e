# simglass/runway/__init__.py

"""
runway - Wind components, crosswind limits and runway data for the
destination airport
"""

# Local Imports
from .core import WindComponentResolver, assess_airport, preferred_end, wind_components
from .data_models import (
    CrosswindAssessment,
    CrosswindStatus,
    Runway,
    RunwayCondition,
    RunwayEnd,
    WeatherReport,
    WindObservation,
)
from .exceptions import InvalidRunwayError, RunwayError
from .runway_loader import AptDatRunwayLoader
from .weather import WeatherConfig, WeatherProvider

__all__ = [
    'WindComponentResolver',
    'assess_airport',
    'preferred_end',
    'wind_components',
    'CrosswindAssessment',
    'CrosswindStatus',
    'Runway',
    'RunwayCondition',
    'RunwayEnd',
    'WeatherReport',
    'WindObservation',
    'InvalidRunwayError',
    'RunwayError',
    'AptDatRunwayLoader',
    'WeatherConfig',
    'WeatherProvider',
]
