# simlogbook/geo/dms.py
"""
Degrees-minutes-seconds representation of an angle. Each component is
truncated with floor, never rounded, so 34.999999 stays at 34 degrees.
"""
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class Cardinal(Enum):
    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    def __str__(self) -> str:
        return self.value

    @property
    def is_negative(self) -> bool:
        return self in (Cardinal.SOUTH, Cardinal.WEST)


@dataclass(frozen=True)
class DMS:
    degrees: int
    minutes: int
    seconds: float
    cardinal: Optional[Cardinal] = None

    @classmethod
    def from_degrees(cls, degrees: float) -> "DMS":
        """Unsigned conversion; the sign of `degrees` is dropped."""
        value = abs(degrees)
        d = math.floor(value)
        m = math.floor((value - d) * 60.0)
        s = (value - d - m / 60.0) * 3600.0
        return cls(degrees=int(d), minutes=int(m), seconds=s)

    @classmethod
    def from_degrees_latitude(cls, lat: float) -> "DMS":
        return replace(cls.from_degrees(lat), cardinal=Cardinal.SOUTH if lat < 0.0 else Cardinal.NORTH)

    @classmethod
    def from_degrees_longitude(cls, lon: float) -> "DMS":
        return replace(cls.from_degrees(lon), cardinal=Cardinal.WEST if lon < 0.0 else Cardinal.EAST)

    def to_degrees(self) -> float:
        d = self.degrees + self.minutes / 60.0 + self.seconds / 3600.0
        if self.cardinal is not None and self.cardinal.is_negative:
            return -d
        return d

    def __str__(self) -> str:
        text = f"{self.degrees}°{self.minutes}'{self.seconds:.2f}\""
        if self.cardinal is not None:
            return f"{text}{self.cardinal}"
        return text
