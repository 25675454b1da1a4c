#!/usr/bin/env python3
# simlogbook/examples/E010_replay_server.py
"""
[TELEMETRY REPLAY SERVER]

Stands in for the X-Plane plugin: listens on the telemetry port and streams a
scripted short hop from LCPH to LCLK as length-prefixed CSV frames, one
sample per interval. Run it, then start `python -m simlogbook XP12`.
"""
import logging
import socket
import sys
import time
from pathlib import Path

from geographiclib.geodesic import Geodesic

sys.path.append(str(Path(__file__).parent.parent))

from simlogbook.constants import SimConnectionConstants
from simlogbook.geo import LatLon
from simlogbook.xp_sim_data import SimData, encode_frame

# --- [1. SCRIPTED FLIGHT] ---
LCPH = LatLon(34.717778, 32.485556)
LCLK = LatLon(34.875, 33.624722)
CRUISE_STEPS = 5
SAMPLE_INTERVAL_S = 1.0


def scripted_flight():
    """Yields (position, engine_on, on_ground) for a complete flight."""
    yield LCPH, False, True
    yield LCPH, True, True
    yield LCPH, True, False
    bearing = Geodesic.WGS84.Inverse(LCPH.lat, LCPH.lon, LCLK.lat, LCLK.lon)["azi1"]
    leg = LCPH.distance(LCLK)
    for step in range(1, CRUISE_STEPS + 1):
        yield LCPH.destination(bearing, leg * step / (CRUISE_STEPS + 1)), True, False
    yield LCLK, True, True
    yield LCLK, False, True


def serve(host: str, port: int) -> None:
    with socket.create_server((host, port)) as server:
        logging.info(f"Waiting for the logbook on {host}:{port}...")
        client, address = server.accept()
        with client:
            logging.info(f"Logbook connected from {address[0]}:{address[1]}")
            for position, engine_on, on_ground in scripted_flight():
                record = SimData(
                    icao="C172",
                    name="Cessna Skyhawk G1000",
                    registration="5B-CAS",
                    latitude=position.lat,
                    longitude=position.lon,
                    engine_on=engine_on,
                    on_ground=on_ground,
                )
                client.sendall(encode_frame(record))
                logging.info(f"Sent: {record.to_csv()}")
                time.sleep(SAMPLE_INTERVAL_S)
        logging.info("Replay finished, closing the connection.")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    try:
        serve(SimConnectionConstants.DEFAULT_HOST, SimConnectionConstants.DEFAULT_PORT)
    except KeyboardInterrupt:
        print("\nReplay stopped.")
