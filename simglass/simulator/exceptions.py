# simglass/simulator/exceptions.py

class SimulatorError(Exception):
    """Base exception for synthetic telemetry errors."""
    pass

class SimulationSetupError(SimulatorError):
    """Raised when the route cannot be flown (fewer than two waypoints)."""
    pass
