# simlogbook/navdata/tests/test_navdata.py

import os
import sqlite3
import tempfile
import unittest
from unittest.mock import MagicMock, patch

from simlogbook.geo import LatLon
from simlogbook.navdata import AirportLocator, BoundingBox, NavdataError, ensure_spatial_index

AIRPORTS = [
    # airport_id, ident, laty, lonx, left_lonx, right_lonx, bottom_laty, top_laty
    (1, "LCPH", 34.717778, 32.485556, 32.46, 32.51, 34.70, 34.73),
    (2, "LCLK", 34.875, 33.624722, 33.59, 33.65, 34.86, 34.89),
]


def create_navdata(connection):
    connection.execute("""
        create table airport (
            airport_id integer primary key, ident text, laty real, lonx real,
            left_lonx real, right_lonx real, bottom_laty real, top_laty real
        )
    """)
    connection.executemany("insert into airport values (?, ?, ?, ?, ?, ?, ?, ?)", AIRPORTS)
    connection.commit()


class TestAirportLocator(unittest.TestCase):

    def setUp(self):
        self.connection = sqlite3.connect(":memory:")
        create_navdata(self.connection)
        ensure_spatial_index(self.connection)
        self.locator = AirportLocator(self.connection)

    def tearDown(self):
        self.locator.close()

    def test_inside_box(self):
        airport = self.locator.find_containing(LatLon(34.72, 32.49))
        self.assertEqual("LCPH", airport.ident)
        self.assertEqual(1, airport.id)
        self.assertEqual(LatLon(34.717778, 32.485556), airport.position)
        self.assertTrue(airport.bbox.contains(LatLon(34.72, 32.49)))

    def test_other_airport(self):
        self.assertEqual("LCLK", self.locator.find_containing(LatLon(34.875, 33.62)).ident)

    def test_outside_every_box(self):
        self.assertIsNone(self.locator.find_containing(LatLon(35.0, 33.0)))

    def test_index_build_is_idempotent(self):
        ensure_spatial_index(self.connection)
        count = self.connection.execute("select count(*) from airport_coords").fetchone()[0]
        self.assertEqual(2, count)

    def test_overlapping_boxes_return_one_airport(self):
        self.connection.execute("insert into airport_coords values (3, 32.40, 32.60, 34.60, 34.80)")
        self.connection.execute(
            "insert into airport (airport_id, ident, laty, lonx) values (3, 'LCRA', 34.59, 32.99)")
        airport = self.locator.find_containing(LatLon(34.72, 32.49))
        self.assertIn(airport.ident, ("LCPH", "LCRA"))


class TestAirportLocatorErrors(unittest.TestCase):

    def test_missing_database(self):
        with self.assertRaises(NavdataError):
            AirportLocator.open(os.path.join(tempfile.gettempdir(), "no-such-navdata.sqlite"))

    def test_missing_tables(self):
        locator = AirportLocator(sqlite3.connect(":memory:"))
        with self.assertRaises(NavdataError):
            locator.find_containing(LatLon(0.0, 0.0))

    def test_failed_index_build_closes_connection(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "navdata.sqlite")
            open(path, "wb").close()
            connection = MagicMock()
            connection.execute.side_effect = sqlite3.OperationalError("no such table: airport")
            with patch("simlogbook.navdata.core.sqlite3.connect", return_value=connection):
                with self.assertRaises(NavdataError):
                    AirportLocator.open(path)
            connection.close.assert_called_once()

    def test_open_builds_index(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "navdata.sqlite")
            connection = sqlite3.connect(path)
            create_navdata(connection)
            connection.close()

            locator = AirportLocator.open(path)
            try:
                self.assertEqual("LCLK", locator.find_containing(LatLon(34.87, 33.6)).ident)
            finally:
                locator.close()


class TestBoundingBox(unittest.TestCase):

    def test_edges_are_inclusive(self):
        box = BoundingBox(1.0, 2.0, 3.0, 4.0)
        self.assertTrue(box.contains(LatLon(3.0, 1.0)))
        self.assertTrue(box.contains(LatLon(4.0, 2.0)))
        self.assertFalse(box.contains(LatLon(4.1, 1.5)))


if __name__ == '__main__':
    unittest.main()
