# simlogbook/navdata/data_models.py

from dataclasses import dataclass
from typing import Optional

from ..geo import LatLon


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box in longitude/latitude degrees."""
    left_lon: float
    right_lon: float
    bottom_lat: float
    top_lat: float

    def contains(self, position: LatLon) -> bool:
        return (self.left_lon <= position.lon <= self.right_lon
                and self.bottom_lat <= position.lat <= self.top_lat)


@dataclass(frozen=True)
class Airport:
    id: int
    ident: str
    position: LatLon
    bbox: Optional[BoundingBox] = None
