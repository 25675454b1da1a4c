#!/usr/bin/env python3
# simlogbook/__main__.py
"""
Command line entry point: connects to a simulator, follows the aircraft and
appends every completed flight to the logbook.

    python -m simlogbook XP12 --host 127.0.0.1 --port 52000
"""
import argparse
import logging
import sys

from .constants import LogbookConstants, NavdataConstants, SimConnectionConstants
from .navdata import AirportLocator, NavdataError
from .sim_connection import SimConnectionError, connect_sim
from .tracker import FlightTracker, Logbook, TrackerConfig, TrackerError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="simlogbook", description="Automatic flight simulator logbook")
    parser.add_argument("sim", choices=SimConnectionConstants.SUPPORTED_SIMS,
                        help="Simulator to connect to")
    parser.add_argument("--host", default=SimConnectionConstants.DEFAULT_HOST,
                        help="Telemetry server host (XP12 only)")
    parser.add_argument("--port", type=int, default=SimConnectionConstants.DEFAULT_PORT,
                        help="Telemetry server port (XP12 only)")
    parser.add_argument("--timeout", type=float, default=SimConnectionConstants.DEFAULT_TIMEOUT,
                        help="Socket read timeout in seconds")
    parser.add_argument("--navdata", default=None,
                        help="Airport database, defaults to the one bundled for the simulator")
    parser.add_argument("--logbook", default=LogbookConstants.DEFAULT_PATH,
                        help="CSV file completed flights are appended to")
    parser.add_argument("--strict-airports", action="store_true",
                        help="Stop when a takeoff or landing happens outside any known airport")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s - %(levelname)s - %(message)s')

    navdata_path = args.navdata or NavdataConstants.DATABASES[args.sim]
    config = TrackerConfig(strict_airports=args.strict_airports)

    try:
        locator = AirportLocator.open(navdata_path)
    except NavdataError as e:
        logging.error(f"Could not load airport data: {e}")
        return 1

    try:
        with Logbook(args.logbook) as logbook:
            logging.info(f"Connecting to {args.sim}...")
            connection = connect_sim(args.sim, host=args.host, port=args.port, timeout=args.timeout)
            tracker = FlightTracker(locator, logbook, config)
            flights = tracker.run(connection)
            logging.info(f"Session ended, {flights} flight(s) logged.")
    except (SimConnectionError, OSError) as e:
        logging.error(f"Simulator connection failed: {e}")
        return 1
    except (TrackerError, NavdataError) as e:
        logging.error(f"Flight tracking stopped: {e}")
        return 1
    except KeyboardInterrupt:
        logging.info("Interrupted, exiting.")
    finally:
        locator.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
