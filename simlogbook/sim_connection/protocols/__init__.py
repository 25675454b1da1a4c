"""
Simulator connection implementations

Currently supported:
- X-Plane 12 (TCP stream from the logbook plugin)
- MSFS (SimConnect polling)
"""

from .xplane import XPlaneConnection, aircraft_from_sim_data
from .msfs import MsfsConnection
from .raw_sim_data import RawSimData, RAW_SIM_DATA_SIZE
from .sim_string import SimString
from .simconnect_dll import SimConnectDispatcher

__all__ = [
    'XPlaneConnection',
    'aircraft_from_sim_data',
    'MsfsConnection',
    'RawSimData',
    'RAW_SIM_DATA_SIZE',
    'SimString',
    'SimConnectDispatcher'
]
