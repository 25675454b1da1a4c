# simlogbook/tracker/core.py
"""
The flight state machine. One message is handled per loop iteration and at
most one transition happens per telemetry sample:

    Preflight --any engine on--> Taxi --airborne--> EnRoute --on ground--> Landed
    Landed --airborne (touch and go)--> EnRoute
    Landed --all engines off--> Complete

A completed flight is sent to the sink immediately and dropped on the next
sample.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

from .data_models import Flight, FlightState
from .exceptions import AirportNotFoundError
from ..navdata import Airport
from ..sim_connection import Aircraft, MessageKind, SimMessage


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class TrackerConfig:
    """Behavior switches for the flight tracker."""
    # raise instead of logging the flight without an airport
    strict_airports: bool = False
    # start a new flight when the sim reports a different aircraft
    reset_on_identity_change: bool = True


class FlightTracker:
    """Drives the current flight from simulator messages."""

    def __init__(self, locator, sink, config: Optional[TrackerConfig] = None,
                 clock: Callable[[], datetime] = utc_now):
        """
        Args:
            locator: anything with find_containing(LatLon) -> Optional[Airport]
            sink: anything with log(Flight), receives completed flights
        """
        self.locator = locator
        self.sink = sink
        self.config = config or TrackerConfig()
        self.clock = clock
        self.current_flight: Optional[Flight] = None
        self.flights_logged = 0

    def run(self, connection) -> int:
        """Handles messages until the simulator quits. Returns flights logged."""
        try:
            while self.handle(connection.next_message()):
                pass
        finally:
            connection.close()
        return self.flights_logged

    def handle(self, message: SimMessage) -> bool:
        """Processes one message; False means tracking is over."""
        if message.kind is MessageKind.TELEMETRY:
            self.update(message.aircraft)
        elif message.kind is MessageKind.OPEN:
            logging.info("Simulator connection established.")
        elif message.kind is MessageKind.QUIT:
            logging.info("Simulator connection closed.")
            self._drop_incomplete_flight()
            return False
        elif message.kind is MessageKind.UNKNOWN:
            logging.debug("Unhandled message received from the simulator.")
        return True

    def update(self, aircraft: Aircraft) -> Optional[Flight]:
        """Applies one telemetry sample. Returns the flight if it completed on this sample."""
        now = self.clock()
        airport = self.locator.find_containing(aircraft.position)

        if self.current_flight is not None and self.current_flight.state is FlightState.COMPLETE:
            self.current_flight = None

        if (self.current_flight is not None and self.config.reset_on_identity_change
                and self.current_flight.aircraft.identity != aircraft.identity):
            logging.warning(
                f"Aircraft changed from {self.current_flight.aircraft.title!r} to {aircraft.title!r}, "
                f"discarding the {self.current_flight.state.value} flight."
            )
            self.current_flight = None

        if self.current_flight is None:
            self.current_flight = Flight(aircraft)
            logging.info(f"Tracking new flight: {aircraft.title} ({aircraft.registration})")

        flight = self.current_flight
        logging.debug(f"{flight}")
        previous = flight.state

        if flight.state is FlightState.PREFLIGHT:
            if aircraft.engine_on:
                flight.taxi_out = now
                flight.state = FlightState.TAXI
        elif flight.state is FlightState.TAXI:
            if not aircraft.on_ground:
                flight.depart(self._require_airport(airport, "takeoff", aircraft), now)
                flight.state = FlightState.EN_ROUTE
        elif flight.state is FlightState.EN_ROUTE:
            if aircraft.on_ground:
                flight.arrive(self._require_airport(airport, "landing", aircraft), now)
                flight.state = FlightState.LANDED
        elif flight.state is FlightState.LANDED:
            if not aircraft.on_ground:
                # touch and go or go around, the last arrival stays recorded
                flight.state = FlightState.EN_ROUTE
            elif not aircraft.engine_on:
                flight.shutdown = now
                flight.state = FlightState.COMPLETE

        if flight.state is not previous:
            logging.info(f"{previous.value} -> {flight.state.value}")

        if flight.state is FlightState.COMPLETE:
            self.sink.log(flight)
            self.flights_logged += 1
            logging.info("Flight completed!")
            return flight
        return None

    def _require_airport(self, airport: Optional[Airport], event: str, aircraft: Aircraft) -> Optional[Airport]:
        if airport is None:
            if self.config.strict_airports:
                raise AirportNotFoundError(event, aircraft.position)
            logging.warning(f"No airport found for {event} at {aircraft.position}, recording it without one.")
        return airport

    def _drop_incomplete_flight(self) -> None:
        if self.current_flight is not None and self.current_flight.state is not FlightState.COMPLETE:
            logging.info(f"Discarding incomplete flight in state {self.current_flight.state.value}.")
        self.current_flight = None
