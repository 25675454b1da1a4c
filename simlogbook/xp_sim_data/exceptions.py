"""simlogbook/xp_sim_data/exceptions.py"""

class SimDataError(Exception):
    """Base exception for telemetry record errors."""
    pass

class MalformedRecord(SimDataError):
    """Raised when a CSV record cannot be decoded."""
    def __init__(self, message="Malformed telemetry record", record=None):
        self.record = record
        super().__init__(f"{message}: {record!r}" if record is not None else message)

class FramingError(SimDataError):
    """Raised when a record cannot be framed for the wire."""
    pass
