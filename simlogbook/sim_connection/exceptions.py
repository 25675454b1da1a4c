"""simlogbook/sim_connection/exceptions.py"""

class SimConnectionError(Exception):
    """Base exception for all simulator connection errors."""
    pass

class RawRecordError(SimConnectionError):
    """Raised when a native telemetry record has the wrong size or layout."""
    pass

class SimStringError(SimConnectionError):
    """Raised for fixed-width strings that are not NUL terminated UTF-8."""
    pass

class UnsupportedSimError(SimConnectionError):
    """Raised when an unknown simulator is requested or its SDK is unavailable."""
    def __init__(self, sim_name, message="Unsupported simulator"):
        self.sim_name = sim_name
        super().__init__(f"{message}: {sim_name}")
