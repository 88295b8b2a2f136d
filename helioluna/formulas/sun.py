"""Solar ephemeris and the solar transit / hour angle algorithm.

d is days since J2000, lw the observer longitude in radians (west
positive), phi the observer latitude in radians.
"""

import math

from .constants import J0, J2000, PERIHELION, RAD
from .coordinates import EquatorialCoordinates
from .position import declination, right_ascension


def solar_mean_anomaly(d: float) -> float:
    return RAD * (357.5291 + 0.98560028 * d)


def ecliptic_longitude(m: float) -> float:
    """Ecliptic longitude of the Sun from its mean anomaly ``m``."""
    # Equation of center
    c = RAD * (1.9148 * math.sin(m) + 0.02 * math.sin(2 * m) + 0.0003 * math.sin(3 * m))
    p = RAD * PERIHELION

    return m + c + p + math.pi


def sun_coordinates(d: float) -> EquatorialCoordinates:
    """Equatorial coordinates of the Sun. Its ecliptic latitude is taken as 0."""
    m = solar_mean_anomaly(d)
    l = ecliptic_longitude(m)

    return EquatorialCoordinates(
        right_ascension=right_ascension(l, 0),
        declination=declination(l, 0),
    )


# --- Sun times ---


def julian_cycle(d: float, lw: float) -> int:
    """Index of the solar noon cycle nearest to ``d``."""
    return round(d - J0 - lw / (2 * math.pi))


def approx_transit(ht: float, lw: float, n: float) -> float:
    return J0 + (ht + lw) / (2 * math.pi) + n


def solar_transit_day(ds: float, m: float, l: float) -> float:
    """Julian day of solar transit corrected by two periodic terms."""
    return J2000 + ds + 0.0053 * math.sin(m) - 0.0069 * math.sin(2 * l)


def hour_angle(h: float, phi: float, dec: float) -> float:
    """Hour angle at which the Sun reaches altitude ``h``.

    Returns NaN when the Sun never reaches ``h`` on that day (polar day or
    night), so that the crossing can be reported as not occurring.
    """
    cos_h = (math.sin(h) - math.sin(phi) * math.sin(dec)) / (math.cos(phi) * math.cos(dec))
    if not -1.0 <= cos_h <= 1.0:
        return math.nan
    return math.acos(cos_h)


def observer_angle(height: float) -> float:
    """Horizon dip in radians for an observer ``height`` meters above the horizon."""
    if height < 0:
        return math.nan
    return RAD * (-2.076 * math.sqrt(height) / 60)


def crossing_day(
    h: float,
    lw: float,
    phi: float,
    dec: float,
    n: float,
    m: float,
    l: float,
) -> float:
    """Julian day at which the setting Sun crosses altitude ``h``.

    The matching rising crossing is the reflection around solar transit:
    ``j_rise = j_noon - (j_set - j_noon)``.
    """
    w = hour_angle(h, phi, dec)
    a = approx_transit(w, lw, n)

    return solar_transit_day(a, m, l)
