# simlogbook/geo/coordinates.py
"""
Latitude/longitude value type with ellipsoidal (WGS84) distance, destination
and local east/north projection.
"""
import math
from dataclasses import dataclass
from typing import Tuple

from geographiclib.geodesic import Geodesic
from geopy.distance import geodesic

from .dms import DMS
from .vectors import heading_to_point

WGS84 = Geodesic.WGS84


def round_half_away(value: float) -> float:
    """Rounds to the nearest whole number, halves away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(frozen=True)
class LatLon:
    """A position in degrees. Latitude in [-90, 90], longitude in [-180, 180]."""
    lat: float
    lon: float

    @classmethod
    def from_radians(cls, lat: float, lon: float) -> "LatLon":
        return cls(math.degrees(lat), math.degrees(lon))

    @classmethod
    def from_dms(cls, lat: DMS, lon: DMS) -> "LatLon":
        return cls(lat.to_degrees(), lon.to_degrees())

    def to_radians(self) -> Tuple[float, float]:
        return math.radians(self.lat), math.radians(self.lon)

    def to_dms(self) -> Tuple[DMS, DMS]:
        return DMS.from_degrees_latitude(self.lat), DMS.from_degrees_longitude(self.lon)

    def latitude(self) -> float:
        return self.lat

    def longitude(self) -> float:
        return self.lon

    def distance(self, other: "LatLon") -> float:
        """Distance in meters between this and another position."""
        return geodesic((self.lat, self.lon), (other.lat, other.lon), ellipsoid='WGS-84').meters

    def destination(self, bearing: float, distance: float) -> "LatLon":
        """New position `distance` meters away along the initial `bearing` (degrees)."""
        point = geodesic(meters=distance, ellipsoid='WGS-84').destination((self.lat, self.lon), bearing)
        return LatLon(point.latitude, point.longitude)

    def distance_xy(self, other: "LatLon") -> Tuple[float, float]:
        """
        Offset of `other` from this position as (east, north) meters.

        The forward azimuth is rounded to a whole degree before the north
        unit vector is rotated by it, so the result is only accurate to
        about 1.7% of the distance off-axis.
        """
        result = WGS84.Inverse(self.lat, self.lon, other.lat, other.lon)
        distance = result['s12']
        direction = heading_to_point(round_half_away(result['azi1']))
        return direction.x * distance, direction.y * distance

    def __str__(self) -> str:
        lat, lon = self.to_dms()
        return f"{lat} {lon}"
