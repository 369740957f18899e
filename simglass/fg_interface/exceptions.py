"""simglass/fg_interface/exceptions.py"""

class FGCommError(Exception):
    """Base exception for all FlightGear communication errors."""
    pass

class ConnectionTimeout(FGCommError):
    """Raised when FlightGear does not answer within the socket timeout."""
    pass

class ProtocolError(FGCommError):
    """Raised for malformed FlightGear responses."""
    pass
