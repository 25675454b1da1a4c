"""
geo - Geodesic calculations on the WGS84 ellipsoid

Exposes the LatLon coordinate type, degree/DMS conversions and the small
vector helpers used to project a geodesic onto local east/north offsets.
"""

from .coordinates import LatLon
from .dms import DMS, Cardinal
from .vectors import Vec2, rotate_point, heading_to_point

__all__ = [
    'LatLon',
    'DMS',
    'Cardinal',
    'Vec2',
    'rotate_point',
    'heading_to_point'
]
