# simlogbook/sim_connection/protocols/sim_string.py

from dataclasses import dataclass

from ..exceptions import SimStringError


@dataclass(frozen=True)
class SimString:
    """
    A fixed-width, NUL terminated string field as laid out by SimConnect.
    Bytes after the first NUL are padding and are ignored.
    """
    raw: bytes

    def to_string(self) -> str:
        end = self.raw.find(b"\x00")
        if end < 0:
            raise SimStringError(f"String field of {len(self.raw)} bytes is not NUL terminated")
        try:
            return self.raw[:end].decode("utf-8")
        except UnicodeDecodeError as e:
            raise SimStringError(f"String field is not valid UTF-8: {e}") from e

    def __str__(self) -> str:
        return self.to_string()
