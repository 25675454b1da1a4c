# simlogbook/sim_connection/protocols/raw_sim_data.py
"""
Decoder for the user aircraft record requested from SimConnect.

The record is packed (no padding) and little-endian, in the order of
SimVars.data_definition():

    offset  size  field
    0       128   TITLE, NUL terminated
    128     8x4   ENG COMBUSTION:1..4, float64, non-zero when burning
    160     8     PLANE LATITUDE, float64 radians
    168     8     PLANE LONGITUDE, float64 radians
    176     8     SIM ON GROUND, float64, non-zero on ground
    184     32    ATC ID, NUL terminated
"""
import struct
from dataclasses import dataclass
from typing import Tuple

from .sim_string import SimString
from ..data_models import Aircraft
from ..exceptions import RawRecordError
from ...constants.simconnect import SimVars
from ...geo import LatLon

RAW_SIM_DATA_SIZE = sum(size for _, _, size in SimVars.data_definition())
FLOAT64 = struct.Struct("<d")
# ICAO type designator is not exposed through SimConnect
UNKNOWN_ICAO = "N/A"


@dataclass(frozen=True)
class RawSimData:
    title: SimString
    eng_combustion: Tuple[float, float, float, float]
    latitude: float
    longitude: float
    sim_on_ground: float
    atc_id: SimString

    @classmethod
    def from_bytes(cls, data: bytes) -> "RawSimData":
        if len(data) < RAW_SIM_DATA_SIZE:
            raise RawRecordError(f"Expected {RAW_SIM_DATA_SIZE} bytes of sim data, got {len(data)}")

        offset = 0

        def take_string(size: int) -> SimString:
            nonlocal offset
            field = SimString(bytes(data[offset:offset + size]))
            offset += size
            return field

        def take_float() -> float:
            nonlocal offset
            (value,) = FLOAT64.unpack_from(data, offset)
            offset += FLOAT64.size
            return value

        title = take_string(SimVars.TITLE[2])
        eng_combustion = tuple(take_float() for _ in SimVars.ENG_COMBUSTION)
        latitude = take_float()
        longitude = take_float()
        sim_on_ground = take_float()
        atc_id = take_string(SimVars.ATC_ID[2])

        return cls(
            title=title,
            eng_combustion=eng_combustion,
            latitude=latitude,
            longitude=longitude,
            sim_on_ground=sim_on_ground,
            atc_id=atc_id,
        )

    def to_aircraft(self) -> Aircraft:
        return Aircraft(
            title=self.title.to_string(),
            icao=UNKNOWN_ICAO,
            # not the most reliable source, but the best one available
            registration=self.atc_id.to_string(),
            position=LatLon.from_radians(self.latitude, self.longitude),
            engines_on=tuple(value != 0.0 for value in self.eng_combustion),
            on_ground=self.sim_on_ground != 0.0,
        )
