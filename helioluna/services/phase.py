"""Named lunar phases.

Maps the continuous phase value of MoonIllumination (0 = new moon,
0.5 = full moon, wrapping at 1) to one of the eight principal and
intermediate phases.
"""

from enum import IntEnum


class MoonPhase(IntEnum):
    """The eight principal and intermediate phases of the Moon."""
    NEW_MOON = 0  # completely in the Sun's shadow
    WAXING_CRESCENT = 1  # 0.1% to 49.9% lit, increasing
    FIRST_QUARTER = 2  # 50% lit
    WAXING_GIBBOUS = 3  # 50.1% to 99.9% lit, increasing
    FULL_MOON = 4  # 100% lit
    WANING_GIBBOUS = 5  # 99.9% to 50.1% lit, decreasing
    LAST_QUARTER = 6  # 50% lit
    WANING_CRESCENT = 7  # 49.9% to 0.1% lit, decreasing


# Phase display names
MOON_PHASE_NAMES = {
    MoonPhase.NEW_MOON: "New Moon",
    MoonPhase.WAXING_CRESCENT: "Waxing Crescent",
    MoonPhase.FIRST_QUARTER: "First Quarter",
    MoonPhase.WAXING_GIBBOUS: "Waxing Gibbous",
    MoonPhase.FULL_MOON: "Full Moon",
    MoonPhase.WANING_GIBBOUS: "Waning Gibbous",
    MoonPhase.LAST_QUARTER: "Last Quarter",
    MoonPhase.WANING_CRESCENT: "Waning Crescent",
}


def classify_phase(phase: float) -> MoonPhase:
    """Map progress through the lunar cycle to a named phase.

    The principal phases sit exactly on 0, 0.25, 0.5 and 0.75; the
    intermediate phases cover the open intervals between them. Anything
    past 0.75 (including 1 and out-of-range values) is a waning crescent.

    Args:
        phase: Progress through the lunar cycle, 0 to 1.

    Returns:
        MoonPhase member.
    """
    if phase == 0:
        return MoonPhase.NEW_MOON
    if 0 < phase < 0.25:
        return MoonPhase.WAXING_CRESCENT
    if phase == 0.25:
        return MoonPhase.FIRST_QUARTER
    if 0.25 < phase < 0.5:
        return MoonPhase.WAXING_GIBBOUS
    if phase == 0.5:
        return MoonPhase.FULL_MOON
    if 0.5 < phase < 0.75:
        return MoonPhase.WANING_GIBBOUS
    if phase == 0.75:
        return MoonPhase.LAST_QUARTER
    return MoonPhase.WANING_CRESCENT


def phase_name(phase: float) -> str:
    """Human-readable name for a phase value, e.g. "Waning Crescent"."""
    return MOON_PHASE_NAMES[classify_phase(phase)]
