# simlogbook/sim_connection/protocols/xplane.py

import logging
import socket
from typing import Optional

from ..data_models import Aircraft, SimMessage
from ...constants.connection import SimConnectionConstants
from ...geo import LatLon
from ...xp_sim_data import SimData, FrameReader, MalformedRecord


def aircraft_from_sim_data(sim_data: SimData) -> Aircraft:
    return Aircraft(
        title=sim_data.name,
        icao=sim_data.icao,
        registration=sim_data.registration,
        position=LatLon(sim_data.latitude, sim_data.longitude),
        engines_on=(sim_data.engine_on,),
        on_ground=sim_data.on_ground,
    )


class XPlaneConnection:
    """Reads length-prefixed telemetry frames from the X-Plane plugin."""

    def __init__(self, sock: socket.socket, recv_size: int = SimConnectionConstants.RECV_SIZE):
        self._sock = sock
        self._reader = FrameReader()
        self._recv_size = recv_size
        self._announced = False

    @classmethod
    def connect(
        cls,
        host: str = SimConnectionConstants.DEFAULT_HOST,
        port: int = SimConnectionConstants.DEFAULT_PORT,
        timeout: float = SimConnectionConstants.DEFAULT_TIMEOUT,
    ) -> "XPlaneConnection":
        # The timeout also bounds every later recv()
        sock = socket.create_connection((host, port), timeout=timeout)
        sock.settimeout(timeout)
        return cls(sock)

    @property
    def closed(self) -> bool:
        return self._sock is None

    def next_message(self) -> SimMessage:
        if not self._announced:
            self._announced = True
            return SimMessage.open()
        if self._sock is None:
            return SimMessage.quit()

        # frames left over from an earlier read come first
        message = self._next_buffered()
        if message is not None:
            return message

        try:
            data = self._sock.recv(self._recv_size)
        except socket.timeout:
            return SimMessage.waiting()
        except ConnectionAbortedError as e:
            logging.info(f"X-Plane connection closed: {e}")
            self.close()
            return SimMessage.quit()

        if not data:
            logging.info("X-Plane closed the connection.")
            self.close()
            return SimMessage.quit()

        self._reader.feed(data)
        return self._next_buffered() or SimMessage.waiting()

    def _next_buffered(self) -> Optional[SimMessage]:
        """Decodes the next complete frame, skipping malformed records."""
        while True:
            payload = self._reader.next_frame()
            if payload is None:
                return None
            try:
                sim_data = SimData.from_csv(payload.decode("utf-8"))
            except (UnicodeDecodeError, MalformedRecord) as e:
                logging.warning(f"Dropping telemetry record: {e}")
                continue
            return SimMessage.telemetry(aircraft_from_sim_data(sim_data))

    def close(self) -> None:
        if self._sock is not None:
            self._sock.close()
            self._sock = None
