"""Moon position, illumination and rise/set times.

Position formulas are based on http://aa.quae.nl/en/reken/hemelpositie.html,
illumination on http://idlastro.gsfc.nasa.gov/ftp/pro/astro/mphase.pro and
chapter 48 of "Astronomical Algorithms" 2nd edition by Jean Meeus
(Willmann-Bell, Richmond) 1998, rise/set on
http://www.stargazing.net/kepler/moonrise.html.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Union

from ..formulas.calendar import days_since_j2000, start_of_day
from ..formulas.constants import MOON_HORIZON_ANGLE, RAD, SUN_DISTANCE_KM
from ..formulas.moon import moon_coordinates
from ..formulas.position import altitude, atmospheric_refraction, azimuth, sidereal_time
from ..formulas.sun import sun_coordinates
from .phase import MoonPhase, classify_phase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoonPosition:
    """Moon's horizontal position for an observer."""
    azimuth: float  # radians, from south, westward positive
    altitude: float  # radians, corrected for refraction
    distance: float  # km
    parallactic_angle: float  # radians


@dataclass(frozen=True)
class MoonIllumination:
    """Illumination of the Moon's disk."""
    fraction: float  # 0.0 (new moon) to 1.0 (full moon)
    phase: float  # 0 new, 0.25 first quarter, 0.5 full, 0.75 last quarter
    angle: float  # radians; negative while waxing, positive while waning

    @property
    def moon_phase(self) -> MoonPhase:
        return classify_phase(self.phase)


@dataclass(frozen=True)
class MoonTimes:
    """Moon rise and set for one UTC calendar day.

    rise/set are None when no crossing happens that day. When neither
    happens, exactly one of always_up/always_down is set.
    """
    rise: Optional[datetime] = None
    set: Optional[datetime] = None
    always_up: bool = False
    always_down: bool = False


def get_position(when: datetime, latitude: float, longitude: float) -> MoonPosition:
    """Compute the Moon's azimuth, altitude, distance and parallactic angle.

    Args:
        when: UTC instant (naive values are taken as UTC).
        latitude: Observer latitude in degrees (positive north).
        longitude: Observer longitude in degrees (positive east).

    Returns:
        MoonPosition; angles in radians, distance in km.
    """
    lw = RAD * -longitude
    phi = RAD * latitude
    d = days_since_j2000(when)

    c = moon_coordinates(d)
    h = sidereal_time(d, lw) - c.right_ascension
    alt = altitude(h, phi, c.declination)
    # Formula 14.1 of "Astronomical Algorithms" 2nd edition by Jean Meeus
    pa = math.atan2(
        math.sin(h),
        math.tan(phi) * math.cos(c.declination) - math.sin(c.declination) * math.cos(h),
    )

    alt = alt + atmospheric_refraction(alt)

    return MoonPosition(
        azimuth=azimuth(h, phi, c.declination),
        altitude=alt,
        distance=c.distance,
        parallactic_angle=pa,
    )


def get_illumination(when: datetime) -> MoonIllumination:
    """Compute the illuminated fraction, phase and limb angle of the Moon."""
    d = days_since_j2000(when)
    s = sun_coordinates(d)
    m = moon_coordinates(d)

    # Geocentric elongation of the Moon from the Sun
    phi = math.acos(
        math.sin(s.declination) * math.sin(m.declination)
        + math.cos(s.declination) * math.cos(m.declination)
        * math.cos(s.right_ascension - m.right_ascension)
    )
    # Selenocentric elongation of the Earth from the Sun (phase angle)
    inc = math.atan2(
        SUN_DISTANCE_KM * math.sin(phi),
        m.distance - SUN_DISTANCE_KM * math.cos(phi),
    )
    angle = math.atan2(
        math.cos(s.declination) * math.sin(s.right_ascension - m.right_ascension),
        math.sin(s.declination) * math.cos(m.declination)
        - math.cos(s.declination) * math.sin(m.declination)
        * math.cos(s.right_ascension - m.right_ascension),
    )

    return MoonIllumination(
        fraction=(1 + math.cos(inc)) / 2,
        phase=0.5 + 0.5 * inc * (-1 if angle < 0 else 1) / math.pi,
        angle=angle,
    )


def get_times(
    when: Union[date, datetime],
    latitude: float,
    longitude: float,
) -> MoonTimes:
    """Find moonrise and moonset for the UTC calendar day of ``when``.

    Walks the day in 2-hour chunks, fitting a parabola through the Moon's
    altitude (minus the horizon correction) at the start, middle and end of
    each chunk and solving it for zero crossings.

    Args:
        when: Date, or instant whose UTC date is used (time of day ignored).
        latitude: Observer latitude in degrees (positive north).
        longitude: Observer longitude in degrees (positive east).

    Returns:
        MoonTimes for that day.
    """
    t = start_of_day(when)

    hc = MOON_HORIZON_ANGLE * RAD
    h0 = get_position(t, latitude, longitude).altitude - hc

    rise = 0.0
    set_ = 0.0
    ye = 0.0
    x1 = x2 = 0.0

    for i in range(1, 25, 2):
        h1 = get_position(t + timedelta(hours=i), latitude, longitude).altitude - hc
        h2 = get_position(t + timedelta(hours=i + 1), latitude, longitude).altitude - hc

        a = (h0 + h2) / 2 - h1
        b = (h2 - h0) / 2
        roots = 0

        if a == 0:
            # Collinear samples: straight line through h1 at x = 0
            ye = h2
            if b != 0:
                x1 = -h1 / b
                if abs(x1) <= 1:
                    roots = 1
        else:
            xe = -b / (2 * a)
            ye = (a * xe + b) * xe + h1
            d = b * b - 4 * a * h1

            if d >= 0:
                dx = math.sqrt(d) / (abs(a) * 2)
                x1 = xe - dx
                x2 = xe + dx
                if abs(x1) <= 1:
                    roots += 1
                if abs(x2) <= 1:
                    roots += 1
                if x1 < -1:
                    x1 = x2

        if roots == 1:
            if h0 < 0:
                rise = i + x1
            else:
                set_ = i + x1
        elif roots == 2:
            rise = i + (x2 if ye < 0 else x1)
            set_ = i + (x1 if ye < 0 else x2)

        if rise > 0 and set_ > 0:
            break

        h0 = h2

    if rise <= 0 and set_ <= 0:
        always_up = ye > 0
        logger.debug("Moon is always %s on %s", "up" if always_up else "down", t.date())
        return MoonTimes(always_up=always_up, always_down=not always_up)

    return MoonTimes(
        rise=t + timedelta(hours=rise) if rise > 0 else None,
        set=t + timedelta(hours=set_) if set_ > 0 else None,
    )
