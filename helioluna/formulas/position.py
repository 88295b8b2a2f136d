"""General spherical astronomy for body positions.

All angles in radians.
"""

import math

from .constants import OBLIQUITY, RAD


def right_ascension(l: float, b: float) -> float:
    """Right ascension from ecliptic longitude ``l`` and latitude ``b``."""
    return math.atan2(
        math.sin(l) * math.cos(OBLIQUITY) - math.tan(b) * math.sin(OBLIQUITY),
        math.cos(l),
    )


def declination(l: float, b: float) -> float:
    """Declination from ecliptic longitude ``l`` and latitude ``b``."""
    return math.asin(
        math.sin(b) * math.cos(OBLIQUITY)
        + math.cos(b) * math.sin(OBLIQUITY) * math.sin(l)
    )


def azimuth(h: float, phi: float, dec: float) -> float:
    """Azimuth measured from south, westward positive.

    Args:
        h: Hour angle.
        phi: Observer latitude.
        dec: Body declination.
    """
    return math.atan2(
        math.sin(h),
        math.cos(h) * math.sin(phi) - math.tan(dec) * math.cos(phi),
    )


def altitude(h: float, phi: float, dec: float) -> float:
    return math.asin(
        math.sin(phi) * math.sin(dec)
        + math.cos(phi) * math.cos(dec) * math.cos(h)
    )


def sidereal_time(d: float, lw: float) -> float:
    """Local sidereal time for days since J2000 and west-positive longitude."""
    return RAD * (280.16 + 360.9856235 * d) - lw


def atmospheric_refraction(h: float) -> float:
    """Altitude correction for atmospheric refraction.

    Formula 16.4 of "Astronomical Algorithms" 2nd edition by Jean Meeus
    (Willmann-Bell, Richmond) 1998:
    1.02 / tan(h + 10.26 / (h + 5.10)), h in degrees, result in arc
    minutes, here with both sides converted to radians.
    """
    # Only valid for positive altitudes; h = -0.08901179 would divide by zero
    if h < 0:
        h = 0
    return 0.0002967 / math.tan(h + 0.00312536 / (h + 0.08901179))
