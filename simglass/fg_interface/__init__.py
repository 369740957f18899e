"""
fg_interface - FlightGear property bridge used as the external telemetry source

Exposes the FGConnection class and its exceptions.
"""

from .core import FGConnection
from .exceptions import FGCommError, ConnectionTimeout, ProtocolError

__all__ = ['FGConnection', 'FGCommError', 'ConnectionTimeout', 'ProtocolError']
