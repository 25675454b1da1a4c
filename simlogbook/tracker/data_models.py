# simlogbook/tracker/data_models.py

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple

from ..constants.navdata import LogbookConstants
from ..navdata import Airport
from ..sim_connection import Aircraft


class FlightState(Enum):
    PREFLIGHT = "Preflight"
    TAXI = "Taxi"
    EN_ROUTE = "EnRoute"
    LANDED = "Landed"
    COMPLETE = "Complete"


def format_time(dt: Optional[datetime]) -> Optional[str]:
    return dt.strftime(LogbookConstants.DATE_FORMAT) if dt is not None else None


def _ident(milestone: Optional[Tuple[Optional[Airport], datetime]]) -> Optional[str]:
    if milestone is None or milestone[0] is None:
        return None
    return milestone[0].ident


@dataclass
class Flight:
    """
    A flight in progress. The aircraft snapshot is taken when the flight is
    created and is never refreshed. Departure and arrival keep the airport
    (None when no airport contained the aircraft) and the time of the event.
    """
    aircraft: Aircraft
    state: FlightState = FlightState.PREFLIGHT
    taxi_out: Optional[datetime] = None
    departure: Optional[Tuple[Optional[Airport], datetime]] = None
    arrival: Optional[Tuple[Optional[Airport], datetime]] = None
    shutdown: Optional[datetime] = None

    def depart(self, airport: Optional[Airport], time: datetime) -> None:
        self.departure = (airport, time)

    def arrive(self, airport: Optional[Airport], time: datetime) -> None:
        self.arrival = (airport, time)

    def to_record(self) -> List[Optional[str]]:
        """Logbook row, None for every milestone not reached."""
        return [
            self.aircraft.title,
            self.aircraft.icao,
            self.aircraft.registration,
            format_time(self.taxi_out),
            _ident(self.departure),
            format_time(self.departure[1]) if self.departure else None,
            _ident(self.arrival),
            format_time(self.arrival[1]) if self.arrival else None,
            format_time(self.shutdown),
        ]
