# simlogbook/xp_sim_data/framing.py
"""
Length-prefixed framing for the telemetry stream. Every frame is a 2 byte
little-endian payload length followed by exactly that many bytes of UTF-8
CSV, with no delimiter.
"""
import struct
from typing import Optional, Union

from .core import SimData
from .exceptions import FramingError

LENGTH_PREFIX = struct.Struct("<H")
MAX_FRAME_SIZE = 0xFFFF


def encode_frame(record: Union[SimData, str, bytes]) -> bytes:
    """Prefixes an encoded record with its byte length."""
    if isinstance(record, SimData):
        record = record.to_csv()
    payload = record.encode("utf-8") if isinstance(record, str) else bytes(record)
    if len(payload) > MAX_FRAME_SIZE:
        raise FramingError(f"Record of {len(payload)} bytes exceeds the {MAX_FRAME_SIZE} byte frame limit")
    return LENGTH_PREFIX.pack(len(payload)) + payload


class FrameReader:
    """
    Accumulates bytes from a stream and hands out complete frame payloads.

    Bytes belonging to an incomplete frame stay buffered until the rest of
    the frame is fed, so a frame is never decoded from a partial read.
    """

    def __init__(self):
        self._buffer = bytearray()

    def feed(self, data: bytes) -> None:
        self._buffer.extend(data)

    def next_frame(self) -> Optional[bytes]:
        """Returns the next complete payload, or None if one is not buffered yet."""
        if len(self._buffer) < LENGTH_PREFIX.size:
            return None
        (length,) = LENGTH_PREFIX.unpack_from(self._buffer)
        end = LENGTH_PREFIX.size + length
        if len(self._buffer) < end:
            return None
        payload = bytes(self._buffer[LENGTH_PREFIX.size:end])
        del self._buffer[:end]
        return payload

    @property
    def pending(self) -> int:
        """Number of buffered bytes not yet returned as a frame."""
        return len(self._buffer)
