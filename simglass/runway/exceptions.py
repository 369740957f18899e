# simglass/runway/exceptions.py

class RunwayError(Exception):
    """Base exception for runway and wind evaluation errors."""
    pass

class InvalidRunwayError(RunwayError):
    """Raised when a runway has no usable end definitions."""
    pass

class WeatherUnavailableError(RunwayError):
    """Raised inside the weather provider when a station report cannot be used."""
    def __init__(self, station: str, reason: str):
        self.station = station
        self.reason = reason
        super().__init__(f"No usable weather for {station}: {reason}")
