# simglass/cockpit/__init__.py

"""
cockpit - Telemetry-source switching and the per-tick instrument readout
"""

# Local Imports
from .core import AvionicsSession, CockpitReadout, TelemetrySource

__all__ = [
    'AvionicsSession',
    'CockpitReadout',
    'TelemetrySource'
]
