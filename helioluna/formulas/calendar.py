"""Conversions between UTC instants and Julian day numbers."""

from datetime import date, datetime, timedelta, timezone
from typing import Union

from .constants import DAY_MS, J1970, J2000

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def as_utc(when: datetime) -> datetime:
    """Return ``when`` as an aware UTC datetime. Naive values are taken as UTC."""
    if when.tzinfo is None:
        return when.replace(tzinfo=timezone.utc)
    return when.astimezone(timezone.utc)


def start_of_day(when: Union[date, datetime]) -> datetime:
    """Truncate a date or datetime to midnight of its UTC calendar date."""
    if isinstance(when, datetime):
        when = as_utc(when)
    return datetime(when.year, when.month, when.day, tzinfo=timezone.utc)


def to_julian_day(when: datetime) -> float:
    """Julian day (with fractional part) of a UTC instant.

    1970-01-01T00:00:00Z maps to 2440587.5. Anything finer than a
    millisecond is floored away.
    """
    unix_ms = (as_utc(when) - EPOCH) // _ONE_MS
    return unix_ms / DAY_MS - 0.5 + J1970


def from_julian_day(julian_day: float) -> datetime:
    """Inverse of :func:`to_julian_day`, rounded to the whole millisecond."""
    unix_ms = round((julian_day + 0.5 - J1970) * DAY_MS)
    return EPOCH + timedelta(milliseconds=unix_ms)


def days_since_j2000(when: datetime) -> float:
    """Days elapsed since the J2000.0 epoch, used by every ephemeris series."""
    return to_julian_day(when) - J2000
