# simlogbook/xp_sim_data/core.py

from dataclasses import dataclass

from .exceptions import MalformedRecord

FIELD_COUNT = 7
SEPARATOR = ","
TRUE, FALSE = "true", "false"


def _parse_bool(token: str) -> bool:
    if token == TRUE:
        return True
    if token == FALSE:
        return False
    raise ValueError(f"invalid boolean token {token!r}")


def _format_bool(value: bool) -> str:
    return TRUE if value else FALSE


@dataclass
class SimData:
    """One telemetry sample as sent by the X-Plane plugin."""
    icao: str
    name: str
    registration: str
    latitude: float
    longitude: float
    engine_on: bool
    on_ground: bool

    @classmethod
    def from_csv(cls, csv: str) -> "SimData":
        """
        Decodes `icao,name,registration,latitude,longitude,engine_on,on_ground`.
        Fields past the seventh are ignored.
        """
        record = csv.split(SEPARATOR)
        if len(record) < FIELD_COUNT:
            raise MalformedRecord(f"Expected {FIELD_COUNT} fields, got {len(record)}", csv)
        try:
            return cls(
                icao=record[0],
                name=record[1],
                registration=record[2],
                latitude=float(record[3]),
                longitude=float(record[4]),
                engine_on=_parse_bool(record[5]),
                on_ground=_parse_bool(record[6]),
            )
        except ValueError as e:
            raise MalformedRecord(str(e), csv) from e

    def to_csv(self) -> str:
        # repr() gives the shortest string that parses back to the same float
        return SEPARATOR.join([
            self.icao,
            self.name,
            self.registration,
            repr(float(self.latitude)),
            repr(float(self.longitude)),
            _format_bool(self.engine_on),
            _format_bool(self.on_ground),
        ])
