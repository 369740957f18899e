"""
Protocol implementations for the FlightGear property bridge

Currently supported:
- Telnet property server (fgfs --telnet=...)
"""

from .telnet import TelnetProtocol

__all__ = ['TelnetProtocol']
