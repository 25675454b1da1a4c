# simlogbook/sim_connection/protocols/simconnect_dll.py
"""
SimConnect dispatcher on top of the Python-SimConnect package (MSFS SDK,
Windows only).

The package's request helpers decode values on a background dispatch thread.
The logbook validates the raw user aircraft record itself, so the session is
created without auto_connect and dispatches are pulled one at a time through
the package's prototyped `SimConnect.dll` functions.
"""
import ctypes
import logging
import os
from ctypes.wintypes import DWORD
from typing import Optional

from SimConnect import SimConnect
from SimConnect.SimConnect import (
    SIMCONNECT_DATATYPE,
    SIMCONNECT_OBJECT_ID_USER,
    SIMCONNECT_PERIOD,
    SIMCONNECT_RECV,
    SIMCONNECT_RECV_SIMOBJECT_DATA,
    SIMCONNECT_UNUSED,
)

from ..data_models import Dispatch
from ..exceptions import SimConnectionError, UnsupportedSimError
from ...constants.connection import SimConnectionConstants
from ...constants.simconnect import SimConnectRecv, SimVars

DLL_ENV_VAR = "SIMCONNECT_DLL"

DATATYPE_BY_SIZE = {
    8: SIMCONNECT_DATATYPE.SIMCONNECT_DATATYPE_FLOAT64,
    32: SIMCONNECT_DATATYPE.SIMCONNECT_DATATYPE_STRING32,
    128: SIMCONNECT_DATATYPE.SIMCONNECT_DATATYPE_STRING128,
}

RECV_SIZE = ctypes.sizeof(SIMCONNECT_RECV)
DEFINE_ID_OFFSET = SIMCONNECT_RECV_SIMOBJECT_DATA.dwDefineID.offset
DATA_OFFSET = SIMCONNECT_RECV_SIMOBJECT_DATA.dwData.offset


def parse_dispatch(buffer: bytes) -> Dispatch:
    """Splits a raw SIMCONNECT_RECV buffer into a Dispatch."""
    if len(buffer) < RECV_SIZE:
        raise SimConnectionError(f"SimConnect message too short: {len(buffer)} bytes")
    recv_id = SIMCONNECT_RECV.from_buffer_copy(buffer).dwID
    if recv_id != SimConnectRecv.SIMOBJECT_DATA:
        return Dispatch(recv_id)

    if len(buffer) < DATA_OFFSET:
        raise SimConnectionError(f"SimConnect object data too short: {len(buffer)} bytes")
    define_id = ctypes.c_uint32.from_buffer_copy(buffer, DEFINE_ID_OFFSET).value
    return Dispatch(recv_id, define_id=define_id, data=bytes(buffer[DATA_OFFSET:]))


def _failed(hr) -> bool:
    return hr is not None and hr < 0


class SimConnectDispatcher:
    """Dispatcher backed by a SimConnect session from the SimConnect package."""

    def __init__(self, sm: SimConnect):
        self._sm = sm

    @classmethod
    def open(
        cls,
        name: str = SimConnectionConstants.CLIENT_NAME,
        library_path: Optional[str] = None,
    ) -> "SimConnectDispatcher":
        library_path = library_path or os.environ.get(DLL_ENV_VAR)
        try:
            if library_path:
                sm = SimConnect(auto_connect=False, library_path=library_path)
            else:
                sm = SimConnect(auto_connect=False)
        except OSError as e:
            raise UnsupportedSimError("MSFS", f"Could not load SimConnect.dll ({e})") from e

        try:
            hr = sm.dll.Open(ctypes.byref(sm.hSimConnect), name.encode("utf-8"), None, 0, 0, 0)
        except OSError as e:
            raise SimConnectionError(f"SimConnect_Open failed: {e}") from e
        if _failed(hr):
            raise SimConnectionError(f"SimConnect_Open failed: 0x{hr & 0xFFFFFFFF:08X}")

        dispatcher = cls(sm)
        dispatcher._request_user_aircraft()
        logging.info("SimConnect session opened.")
        return dispatcher

    def _request_user_aircraft(self) -> None:
        define_id = SimConnectionConstants.DEFINE_ID
        for name, units, size in SimVars.data_definition():
            hr = self._sm.dll.AddToDataDefinition(
                self._sm.hSimConnect, define_id, name.encode("utf-8"),
                units.encode("utf-8") if units else None,
                DATATYPE_BY_SIZE[size], 0, SIMCONNECT_UNUSED,
            )
            if _failed(hr):
                raise SimConnectionError(f"Could not register {name}: 0x{hr & 0xFFFFFFFF:08X}")

        hr = self._sm.dll.RequestDataOnSimObject(
            self._sm.hSimConnect, SimConnectionConstants.REQUEST_ID, define_id,
            SIMCONNECT_OBJECT_ID_USER, SIMCONNECT_PERIOD.SIMCONNECT_PERIOD_SECOND, 0, 0, 0, 0,
        )
        if _failed(hr):
            raise SimConnectionError(f"SimConnect_RequestDataOnSimObject failed: 0x{hr & 0xFFFFFFFF:08X}")

    def get_next_dispatch(self) -> Optional[Dispatch]:
        if self._sm is None:
            return None
        data = ctypes.POINTER(SIMCONNECT_RECV)()
        size = DWORD()
        try:
            hr = self._sm.dll.GetNextDispatch(self._sm.hSimConnect, ctypes.byref(data), ctypes.byref(size))
        except OSError:
            # E_FAIL is how an empty queue is reported
            return None
        if _failed(hr) or not data:
            return None
        return parse_dispatch(ctypes.string_at(data, size.value))

    def close(self) -> None:
        if self._sm is not None:
            self._sm.dll.Close(self._sm.hSimConnect)
            self._sm = None
            logging.info("SimConnect session closed.")
