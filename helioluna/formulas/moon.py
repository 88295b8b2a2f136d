"""Lunar ephemeris (short-period series)."""

import math

from .constants import RAD
from .coordinates import LunarCoordinates
from .position import declination, right_ascension


def moon_coordinates(d: float) -> LunarCoordinates:
    """Geocentric equatorial coordinates and distance of the Moon.

    Args:
        d: Days since J2000.

    Returns:
        LunarCoordinates with distance in km.
    """
    l0 = RAD * (218.316 + 13.176396 * d)  # ecliptic longitude
    m = RAD * (134.963 + 13.064993 * d)  # mean anomaly
    f = RAD * (93.272 + 13.229350 * d)  # mean distance

    l = l0 + RAD * 6.289 * math.sin(m)  # longitude
    b = RAD * 5.128 * math.sin(f)  # latitude
    dt = 385001 - 20905 * math.cos(m)  # distance to the moon in km

    return LunarCoordinates(
        right_ascension=right_ascension(l, b),
        declination=declination(l, b),
        distance=dt,
    )
