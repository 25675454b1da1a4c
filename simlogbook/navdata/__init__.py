"""
navdata - Airport lookups against the simulator's navigation database

Airports are matched by bounding box through an SQLite R*Tree index.
"""

from .core import AirportLocator, ensure_spatial_index
from .data_models import Airport, BoundingBox
from .exceptions import NavdataError

__all__ = [
    'AirportLocator',
    'ensure_spatial_index',
    'Airport',
    'BoundingBox',
    'NavdataError'
]
