"""
xp_sim_data - Telemetry record shared by the X-Plane plugin and the logbook

One record per simulator tick, encoded as a 7 field CSV line and sent over
TCP with a 2 byte little-endian length prefix.
"""

from .core import SimData, FIELD_COUNT
from .framing import encode_frame, FrameReader, LENGTH_PREFIX, MAX_FRAME_SIZE
from .exceptions import SimDataError, MalformedRecord, FramingError

__all__ = [
    'SimData',
    'FIELD_COUNT',
    'encode_frame',
    'FrameReader',
    'LENGTH_PREFIX',
    'MAX_FRAME_SIZE',
    'SimDataError',
    'MalformedRecord',
    'FramingError'
]
