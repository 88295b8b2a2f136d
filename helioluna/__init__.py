"""Sun and Moon positions, phases, twilight times and moon rise/set.

All angles passed in are degrees, all angles returned are radians, and all
instants are UTC.
"""

from .formulas.calendar import days_since_j2000, from_julian_day, to_julian_day
from .formulas.coordinates import EquatorialCoordinates, LunarCoordinates
from .services.moon import (
    MoonIllumination,
    MoonPosition,
    MoonTimes,
    get_illumination as get_moon_illumination,
    get_position as get_moon_position,
    get_times as get_moon_times,
)
from .services.phase import MOON_PHASE_NAMES, MoonPhase, classify_phase, phase_name
from .services.sun import (
    SUN_TIMES,
    SunPhase,
    SunPosition,
    SunTimes,
    get_position as get_sun_position,
    get_times as get_sun_times,
)

__all__ = [
    "EquatorialCoordinates",
    "LunarCoordinates",
    "MOON_PHASE_NAMES",
    "MoonIllumination",
    "MoonPhase",
    "MoonPosition",
    "MoonTimes",
    "SUN_TIMES",
    "SunPhase",
    "SunPosition",
    "SunTimes",
    "classify_phase",
    "days_since_j2000",
    "from_julian_day",
    "get_moon_illumination",
    "get_moon_position",
    "get_moon_times",
    "get_sun_position",
    "get_sun_times",
    "phase_name",
    "to_julian_day",
]
