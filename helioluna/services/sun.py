"""Sun position and daily sun phase times.

Provides the Sun's azimuth/altitude for an observer and the fourteen named
times of a calendar day: solar noon and nadir, sunrise/sunset, and the
twilight and golden hour boundaries.
"""

import logging
import math
from dataclasses import asdict, dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional, Union

from ..formulas.calendar import days_since_j2000, from_julian_day, start_of_day
from ..formulas.constants import RAD
from ..formulas.position import altitude, azimuth, declination, sidereal_time
from ..formulas.sun import (
    approx_transit,
    crossing_day,
    ecliptic_longitude,
    julian_cycle,
    observer_angle,
    solar_mean_anomaly,
    solar_transit_day,
    sun_coordinates,
)

logger = logging.getLogger(__name__)


class SunPhase(str, Enum):
    """Names of the sun phase times, equal to the SunTimes field names."""
    SOLAR_NOON = "solar_noon"  # sun is in the highest position
    NADIR = "nadir"  # darkest moment of the night, sun is in the lowest position
    SUNRISE = "sunrise"  # top edge of the sun appears on the horizon
    SUNSET = "sunset"  # sun disappears below the horizon, evening civil twilight starts
    SUNRISE_END = "sunrise_end"  # bottom edge of the sun touches the horizon
    SUNSET_START = "sunset_start"  # bottom edge of the sun touches the horizon
    DAWN = "dawn"  # morning nautical twilight ends, morning civil twilight starts
    DUSK = "dusk"  # evening nautical twilight starts
    NAUTICAL_DAWN = "nautical_dawn"  # morning nautical twilight starts
    NAUTICAL_DUSK = "nautical_dusk"  # evening astronomical twilight starts
    NIGHT_END = "night_end"  # morning astronomical twilight starts
    NIGHT = "night"  # dark enough for astronomical observations
    GOLDEN_HOUR_END = "golden_hour_end"  # morning golden hour ends
    GOLDEN_HOUR = "golden_hour"  # evening golden hour starts


# Sun altitude (degrees) with the phase reached while rising and setting
SUN_TIMES = (
    (-0.833, SunPhase.SUNRISE, SunPhase.SUNSET),
    (-0.3, SunPhase.SUNRISE_END, SunPhase.SUNSET_START),
    (-6, SunPhase.DAWN, SunPhase.DUSK),
    (-12, SunPhase.NAUTICAL_DAWN, SunPhase.NAUTICAL_DUSK),
    (-18, SunPhase.NIGHT_END, SunPhase.NIGHT),
    (6, SunPhase.GOLDEN_HOUR_END, SunPhase.GOLDEN_HOUR),
)


@dataclass(frozen=True)
class SunPosition:
    """Sun's horizontal position for an observer (radians)."""
    azimuth: float  # from south, westward positive
    altitude: float  # above the horizon


@dataclass(frozen=True)
class SunTimes:
    """Sun phase times (UTC) for one calendar day at one location.

    A phase that does not occur that day (polar day or night, or a
    threshold the Sun never reaches) is None.
    """
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

    def __getitem__(self, phase: Union[SunPhase, str]) -> Optional[datetime]:
        return getattr(self, SunPhase(phase).value)

    @property
    def day_length(self) -> Optional[timedelta]:
        """Time from sunrise to sunset, or None if either does not occur."""
        if self.sunrise is None or self.sunset is None:
            return None
        return self.sunset - self.sunrise

    def to_dict(self) -> dict[str, Optional[datetime]]:
        return asdict(self)


def get_position(when: datetime, latitude: float, longitude: float) -> SunPosition:
    """Compute the Sun's azimuth and altitude.

    No refraction correction is applied.

    Args:
        when: UTC instant (naive values are taken as UTC).
        latitude: Observer latitude in degrees (positive north).
        longitude: Observer longitude in degrees (positive east).

    Returns:
        SunPosition in radians.
    """
    lw = RAD * -longitude
    phi = RAD * latitude
    d = days_since_j2000(when)

    c = sun_coordinates(d)
    h = sidereal_time(d, lw) - c.right_ascension

    return SunPosition(
        azimuth=azimuth(h, phi, c.declination),
        altitude=altitude(h, phi, c.declination),
    )


def _to_instant(julian_day: float, phase: SunPhase) -> Optional[datetime]:
    if math.isnan(julian_day):
        logger.debug("Sun phase %s does not occur", phase.value)
        return None
    return from_julian_day(julian_day)


def get_times(
    when: Union[date, datetime],
    latitude: float,
    longitude: float,
    height: float = 0.0,
) -> SunTimes:
    """Compute the sun phase times for the UTC calendar day of ``when``.

    Args:
        when: Date, or instant whose UTC date is used (time of day ignored).
        latitude: Observer latitude in degrees (positive north).
        longitude: Observer longitude in degrees (positive east).
        height: Observer height in meters relative to the horizon.

    Returns:
        SunTimes with solar noon, nadir and the twelve rise/set phases.
    """
    lw = RAD * -longitude
    phi = RAD * latitude

    dh = observer_angle(height)

    # J2000 is at noon; a midnight anchor rounds to the previous day's cycle
    d = days_since_j2000(start_of_day(when) + timedelta(hours=12))
    n = julian_cycle(d, lw)
    ds = approx_transit(0, lw, n)

    m = solar_mean_anomaly(ds)
    l = ecliptic_longitude(m)
    dec = declination(l, 0)

    j_noon = solar_transit_day(ds, m, l)

    times = {
        SunPhase.SOLAR_NOON.value: from_julian_day(j_noon),
        SunPhase.NADIR.value: from_julian_day(j_noon - 0.5),
    }

    for angle, rise_phase, set_phase in SUN_TIMES:
        h0 = angle * RAD + dh
        j_set = crossing_day(h0, lw, phi, dec, n, m, l)
        j_rise = j_noon - (j_set - j_noon)

        times[rise_phase.value] = _to_instant(j_rise, rise_phase)
        times[set_phase.value] = _to_instant(j_set, set_phase)

    return SunTimes(**times)
