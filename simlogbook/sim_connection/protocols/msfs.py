# simlogbook/sim_connection/protocols/msfs.py

import logging
import time
from typing import Callable

from .raw_sim_data import RawSimData
from ..data_models import Dispatch, SimMessage
from ..exceptions import RawRecordError, SimStringError
from ...constants.connection import SimConnectionConstants
from ...constants.simconnect import SimConnectRecv


class MsfsConnection:
    """
    Polls SimConnect for the user aircraft record.

    The dispatcher is the native binding; it is owned by this connection and
    closed when the simulator quits or close() is called.
    """

    def __init__(
        self,
        dispatcher,
        poll_interval: float = SimConnectionConstants.POLL_INTERVAL,
        define_id: int = SimConnectionConstants.DEFINE_ID,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._dispatcher = dispatcher
        self.poll_interval = poll_interval
        self.define_id = define_id
        self._sleep = sleep

    def next_message(self) -> SimMessage:
        if self._dispatcher is None:
            return SimMessage.quit()

        dispatch = self._dispatcher.get_next_dispatch()
        if dispatch is None:
            self._sleep(self.poll_interval)
            return SimMessage.waiting()

        if dispatch.recv_id == SimConnectRecv.OPEN:
            return SimMessage.open()
        if dispatch.recv_id == SimConnectRecv.QUIT:
            self.close()
            return SimMessage.quit()
        if dispatch.recv_id == SimConnectRecv.SIMOBJECT_DATA:
            return self._decode(dispatch)

        logging.debug(f"Unhandled SimConnect message: {dispatch.recv_id}")
        return SimMessage.unknown()

    def _decode(self, dispatch: Dispatch) -> SimMessage:
        if dispatch.define_id != self.define_id:
            logging.debug(f"Ignoring data for definition {dispatch.define_id}")
            return SimMessage.unknown()
        try:
            aircraft = RawSimData.from_bytes(dispatch.data).to_aircraft()
        except (RawRecordError, SimStringError) as e:
            logging.warning(f"Dropping SimConnect record: {e}")
            return SimMessage.unknown()
        return SimMessage.telemetry(aircraft)

    def close(self) -> None:
        if self._dispatcher is not None:
            self._dispatcher.close()
            self._dispatcher = None
