# simlogbook/navdata/core.py
"""
Airport proximity lookup. The navigation database is produced by an external
tool (Little Navmap style schema); only the `airport` table and the
`airport_coords` R*Tree built from it are used here.
"""
import logging
import os
import sqlite3
from typing import Optional

from .data_models import Airport, BoundingBox
from .exceptions import NavdataError
from ..constants.navdata import NavdataConstants
from ..geo import LatLon

CREATE_SPATIAL_INDEX = f"""
    create virtual table if not exists {NavdataConstants.SPATIAL_INDEX} using rtree(
        airport_id, left_lonx, right_lonx, bottom_laty, top_laty
    )
"""

POPULATE_SPATIAL_INDEX = f"""
    insert or ignore into {NavdataConstants.SPATIAL_INDEX}
        select airport_id, left_lonx, right_lonx, bottom_laty, top_laty
          from {NavdataConstants.AIRPORT_TABLE}
"""

FIND_CONTAINING = f"""
    select a.airport_id, a.ident, a.laty, a.lonx,
           c.left_lonx, c.right_lonx, c.bottom_laty, c.top_laty
      from {NavdataConstants.SPATIAL_INDEX} c
      join {NavdataConstants.AIRPORT_TABLE} a on a.airport_id = c.airport_id
     where c.left_lonx <= ?1 and c.right_lonx >= ?1
       and c.bottom_laty <= ?2 and c.top_laty >= ?2
"""


def ensure_spatial_index(connection: sqlite3.Connection) -> None:
    """Creates and fills the airport bounding box index if it is missing."""
    try:
        with connection:
            connection.execute(CREATE_SPATIAL_INDEX)
            connection.execute(POPULATE_SPATIAL_INDEX)
    except sqlite3.Error as e:
        raise NavdataError(f"Could not build the airport spatial index: {e}") from e


class AirportLocator:
    """Finds the airport whose bounding box contains a position."""

    def __init__(self, connection: sqlite3.Connection):
        self._connection = connection

    @classmethod
    def open(cls, path: str, build_index: bool = True) -> "AirportLocator":
        # sqlite3 would silently create an empty database
        if not os.path.isfile(path):
            raise NavdataError(f"Navigation database not found: {path}")
        try:
            connection = sqlite3.connect(path)
        except sqlite3.Error as e:
            raise NavdataError(f"Could not open {path}: {e}") from e
        if build_index:
            try:
                ensure_spatial_index(connection)
            except NavdataError:
                connection.close()
                raise
        logging.info(f"Navigation database loaded: {path}")
        return cls(connection)

    def find_containing(self, position: LatLon) -> Optional[Airport]:
        """
        Returns the airport whose bounding box contains `position`, or None.

        Boxes are expected not to overlap. When they do, the first row SQLite
        returns wins; that order is unspecified.
        """
        try:
            rows = self._connection.execute(FIND_CONTAINING, (position.lon, position.lat)).fetchall()
        except sqlite3.Error as e:
            raise NavdataError(f"Airport lookup failed: {e}") from e

        if not rows:
            return None
        if len(rows) > 1:
            logging.debug(f"{len(rows)} airports contain {position}, using {rows[0][1]}")

        airport_id, ident, lat, lon, left, right, bottom, top = rows[0]
        return Airport(
            id=airport_id,
            ident=ident,
            position=LatLon(lat, lon),
            bbox=BoundingBox(left, right, bottom, top),
        )

    def close(self) -> None:
        self._connection.close()
