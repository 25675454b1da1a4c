# simlogbook/sim_connection/data_models.py
"""
Data structures passed from a simulator connection to the flight tracker.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

from ..geo import LatLon


@dataclass(frozen=True)
class Aircraft:
    """One telemetry sample of the user aircraft."""
    title: str
    icao: str
    registration: str
    position: LatLon
    engines_on: Tuple[bool, ...]
    on_ground: bool

    @property
    def engine_on(self) -> bool:
        """True while any engine is running."""
        return any(self.engines_on)

    @property
    def identity(self) -> Tuple[str, str, str]:
        return self.title, self.icao, self.registration


class MessageKind(Enum):
    OPEN = auto()
    QUIT = auto()
    TELEMETRY = auto()
    WAITING = auto()     # nothing new within the read timeout
    UNKNOWN = auto()


@dataclass(frozen=True)
class SimMessage:
    kind: MessageKind
    aircraft: Optional[Aircraft] = None

    @classmethod
    def open(cls) -> "SimMessage":
        return cls(MessageKind.OPEN)

    @classmethod
    def quit(cls) -> "SimMessage":
        return cls(MessageKind.QUIT)

    @classmethod
    def waiting(cls) -> "SimMessage":
        return cls(MessageKind.WAITING)

    @classmethod
    def unknown(cls) -> "SimMessage":
        return cls(MessageKind.UNKNOWN)

    @classmethod
    def telemetry(cls, aircraft: Aircraft) -> "SimMessage":
        return cls(MessageKind.TELEMETRY, aircraft)


@dataclass(frozen=True)
class Dispatch:
    """A message received from the native SDK, before decoding."""
    recv_id: int
    define_id: int = 0
    data: bytes = b""
