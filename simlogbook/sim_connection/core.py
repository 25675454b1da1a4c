# simlogbook/sim_connection/core.py

import logging
from typing import Optional, Protocol

from .data_models import SimMessage, Dispatch
from .exceptions import UnsupportedSimError
from ..constants.connection import SimConnectionConstants


class SimConnection(Protocol):
    """Anything that yields simulator messages, one per call."""

    def next_message(self) -> SimMessage:
        ...

    def close(self) -> None:
        ...


class Dispatcher(Protocol):
    """Native SDK binding used by MsfsConnection."""

    def get_next_dispatch(self) -> Optional[Dispatch]:
        ...

    def close(self) -> None:
        ...


def connect_sim(
    sim_name: str,
    host: str = SimConnectionConstants.DEFAULT_HOST,
    port: int = SimConnectionConstants.DEFAULT_PORT,
    timeout: float = SimConnectionConstants.DEFAULT_TIMEOUT,
    dispatcher: Optional[Dispatcher] = None,
) -> SimConnection:
    """Opens the connection for the selected simulator."""
    # Imported here to keep protocols free to import from this module
    from .protocols import XPlaneConnection, MsfsConnection, SimConnectDispatcher

    if sim_name == "XP12":
        logging.info(f"Connecting to X-Plane at {host}:{port}")
        return XPlaneConnection.connect(host, port, timeout)
    if sim_name == "MSFS":
        logging.info("Connecting to MSFS through SimConnect")
        return MsfsConnection(dispatcher or SimConnectDispatcher.open())
    raise UnsupportedSimError(sim_name, f"Valid options are {list(SimConnectionConstants.SUPPORTED_SIMS)}")
