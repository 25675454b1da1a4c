"""
tracker - Flight lifecycle state machine and logbook output

FlightTracker consumes simulator messages, drives one Flight at a time
through Preflight -> Taxi -> EnRoute -> Landed -> Complete and hands each
completed flight to a logbook sink.
"""

from .core import FlightTracker, TrackerConfig, utc_now
from .data_models import Flight, FlightState
from .logbook import Logbook
from .exceptions import TrackerError, AirportNotFoundError

__all__ = [
    'FlightTracker',
    'TrackerConfig',
    'utc_now',
    'Flight',
    'FlightState',
    'Logbook',
    'TrackerError',
    'AirportNotFoundError'
]
