"""Coordinate records produced by the ephemeris formulas."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EquatorialCoordinates:
    """Orientation of a body relative to Earth's equatorial plane."""
    right_ascension: float  # radians
    declination: float  # radians


@dataclass(frozen=True)
class LunarCoordinates(EquatorialCoordinates):
    """Equatorial coordinates of the Moon plus its distance from Earth."""
    distance: float  # km
