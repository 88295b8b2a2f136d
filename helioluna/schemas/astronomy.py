"""Pydantic schemas for serialized sun and moon results.

Angles are copied verbatim in radians; the *_deg fields are a display
convenience derived from them.
"""

import math
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from ..services.moon import MoonIllumination, MoonPosition, MoonTimes
from ..services.phase import MOON_PHASE_NAMES
from ..services.sun import SunPosition, SunTimes


class SunPositionData(BaseModel):
    azimuth: float
    altitude: float
    azimuth_deg: float
    altitude_deg: float

    @classmethod
    def from_result(cls, position: SunPosition) -> "SunPositionData":
        return cls(
            azimuth=position.azimuth,
            altitude=position.altitude,
            azimuth_deg=math.degrees(position.azimuth),
            altitude_deg=math.degrees(position.altitude),
        )


class SunTimesData(BaseModel):
    solar_noon: datetime
    nadir: datetime
    sunrise: Optional[datetime] = None
    sunset: Optional[datetime] = None
    sunrise_end: Optional[datetime] = None
    sunset_start: Optional[datetime] = None
    dawn: Optional[datetime] = None
    dusk: Optional[datetime] = None
    nautical_dawn: Optional[datetime] = None
    nautical_dusk: Optional[datetime] = None
    night_end: Optional[datetime] = None
    night: Optional[datetime] = None
    golden_hour_end: Optional[datetime] = None
    golden_hour: Optional[datetime] = None
    day_length_seconds: Optional[float] = None

    @classmethod
    def from_result(cls, times: SunTimes) -> "SunTimesData":
        day_length = times.day_length
        return cls(
            **times.to_dict(),
            day_length_seconds=day_length.total_seconds() if day_length is not None else None,
        )


class MoonPositionData(BaseModel):
    azimuth: float
    altitude: float
    distance: float  # km
    parallactic_angle: float
    azimuth_deg: float
    altitude_deg: float

    @classmethod
    def from_result(cls, position: MoonPosition) -> "MoonPositionData":
        return cls(
            azimuth=position.azimuth,
            altitude=position.altitude,
            distance=position.distance,
            parallactic_angle=position.parallactic_angle,
            azimuth_deg=math.degrees(position.azimuth),
            altitude_deg=math.degrees(position.altitude),
        )


class MoonIlluminationData(BaseModel):
    fraction: float
    phase: float
    angle: float
    phase_name: str

    @classmethod
    def from_result(cls, illumination: MoonIllumination) -> "MoonIlluminationData":
        return cls(
            fraction=illumination.fraction,
            phase=illumination.phase,
            angle=illumination.angle,
            phase_name=MOON_PHASE_NAMES[illumination.moon_phase],
        )


class MoonTimesData(BaseModel):
    rise: Optional[datetime] = None
    set: Optional[datetime] = None
    always_up: bool = False
    always_down: bool = False

    @classmethod
    def from_result(cls, times: MoonTimes) -> "MoonTimesData":
        return cls(
            rise=times.rise,
            set=times.set,
            always_up=times.always_up,
            always_down=times.always_down,
        )


class SunData(BaseModel):
    position: SunPositionData
    times: SunTimesData


class MoonData(BaseModel):
    position: MoonPositionData
    illumination: MoonIlluminationData
    times: MoonTimesData


class AstronomyReport(BaseModel):
    """Sun and moon data for one instant and location."""
    at: datetime
    latitude: float
    longitude: float
    height: float = 0.0
    sun: Optional[SunData] = None
    moon: Optional[MoonData] = None
