# simglass/constants/connection.py

class FGConnectionConstants:
    """Shared constants for the FlightGear telemetry bridge."""

    DEFAULT_HOST = "localhost"
    DEFAULT_PORT = 5500
    DEFAULT_TIMEOUT_SEC = 5.0
    DEFAULT_TELNET_CONFIG = f"socket,bi,10,{DEFAULT_HOST},{DEFAULT_PORT},tcp"


class WebServiceConstants:
    """Endpoints for the optional network collaborators."""

    AVIATION_WEATHER_URL = "https://aviationweather.gov/api/data/metar"
    SIMBRIEF_URL = "https://www.simbrief.com/api/xml.fetcher.php"
    REQUEST_TIMEOUT_SEC = 10
