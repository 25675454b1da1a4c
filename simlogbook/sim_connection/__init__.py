"""
sim_connection - Simulator telemetry sources for the logbook

Every source exposes next_message(), returning one SimMessage per call.
Sources are chosen at startup with connect_sim().
"""

from .data_models import Aircraft, MessageKind, SimMessage, Dispatch
from .core import SimConnection, Dispatcher, connect_sim
from .protocols import XPlaneConnection, MsfsConnection, RawSimData, SimString, SimConnectDispatcher
from .exceptions import SimConnectionError, RawRecordError, SimStringError, UnsupportedSimError

__all__ = [
    'Aircraft',
    'MessageKind',
    'SimMessage',
    'Dispatch',
    'SimConnection',
    'Dispatcher',
    'connect_sim',
    'XPlaneConnection',
    'MsfsConnection',
    'RawSimData',
    'SimString',
    'SimConnectDispatcher',
    'SimConnectionError',
    'RawRecordError',
    'SimStringError',
    'UnsupportedSimError'
]
