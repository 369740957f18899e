"""simglass/navigation/exceptions.py"""

class NavigationError(Exception):
    """Base exception for navigation and flight-plan errors."""
    pass

class InvalidPlanError(NavigationError):
    """Raised when a plan has too few or malformed waypoints. Nothing is applied."""
    pass

class OutOfRangeError(NavigationError):
    """Raised for a waypoint or leg index outside the plan bounds."""
    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"Waypoint index {index} outside plan of {length} waypoints")

class UnknownWaypointError(NavigationError):
    """Raised when an identifier does not resolve to a waypoint."""
    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Unknown waypoint: {identifier}")

class PlanImportError(NavigationError):
    """Raised when an import source is structurally unreadable."""
    pass

class VnavError(NavigationError):
    """Raised for invalid vertical-navigation inputs."""
    pass
