# simglass/simulator/__init__.py

"""
simulator - Synthetic flight-progress telemetry along the active flight plan
"""

# Local Imports
from .core import FlightProgressSimulator, SimulationContext
from .exceptions import SimulatorError, SimulationSetupError
from .config import SimulatorConfig

__all__ = [
    'FlightProgressSimulator',
    'SimulationContext',
    'SimulatorError',
    'SimulationSetupError',
    'SimulatorConfig'
]
