"""simlogbook/tracker/exceptions.py"""

class TrackerError(Exception):
    """Base class for flight tracking errors"""
    pass

class AirportNotFoundError(TrackerError):
    """No airport contains the aircraft at takeoff or touchdown"""
    def __init__(self, event, position, message="Invalid airport"):
        self.event = event
        self.position = position
        super().__init__(f"{message} for {event} at {position}")
