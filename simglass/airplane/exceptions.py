# simglass/airplane/exceptions.py

class AircraftException(Exception):
    """Base exception for all aircraft-related errors"""
    pass

class FuelSystemException(AircraftException):
    """Fuel state could not be read or computed"""
    pass

class FlightSystemException(AircraftException):
    """Flight state monitoring errors"""
    pass

class UnknownAircraftError(AircraftException):
    """Raised when an aircraft id is not in the profile table"""
    def __init__(self, aircraft_id: str):
        self.aircraft_id = aircraft_id
        super().__init__(f"Unknown aircraft type: {aircraft_id}")
