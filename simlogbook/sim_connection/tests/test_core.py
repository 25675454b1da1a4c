# simlogbook/sim_connection/tests/test_core.py

import unittest
from unittest.mock import patch, MagicMock

from simlogbook.geo import LatLon
from simlogbook.sim_connection import (
    Aircraft, MsfsConnection, SimMessage, MessageKind, UnsupportedSimError, XPlaneConnection, connect_sim
)


class TestConnectSim(unittest.TestCase):

    @patch.object(XPlaneConnection, 'connect')
    def test_xplane(self, mock_connect):
        conn = connect_sim("XP12", host="10.0.0.2", port=52001, timeout=0.5)
        mock_connect.assert_called_once_with("10.0.0.2", 52001, 0.5)
        self.assertIs(mock_connect.return_value, conn)

    def test_msfs_with_dispatcher(self):
        conn = connect_sim("MSFS", dispatcher=MagicMock())
        self.assertIsInstance(conn, MsfsConnection)

    def test_unknown_sim(self):
        with self.assertRaises(UnsupportedSimError) as ctx:
            connect_sim("FS2004")
        self.assertEqual("FS2004", ctx.exception.sim_name)


class TestDataModels(unittest.TestCase):

    def test_engine_on_is_any_engine(self):
        aircraft = Aircraft("A", "B", "C", LatLon(0.0, 0.0), (False, True), True)
        self.assertTrue(aircraft.engine_on)
        self.assertFalse(Aircraft("A", "B", "C", LatLon(0.0, 0.0), (False, False), True).engine_on)

    def test_identity(self):
        aircraft = Aircraft("Title", "ICAO", "REG", LatLon(0.0, 0.0), (True,), True)
        self.assertEqual(("Title", "ICAO", "REG"), aircraft.identity)

    def test_message_constructors(self):
        self.assertEqual(MessageKind.WAITING, SimMessage.waiting().kind)
        self.assertIsNone(SimMessage.quit().aircraft)


if __name__ == '__main__':
    unittest.main()
