"""Tests for the package-level API."""

from datetime import date, datetime, timezone

import helioluna

DATE = datetime(2013, 3, 5, tzinfo=timezone.utc)


class TestFacade:
    def test_sun(self):
        assert helioluna.get_sun_position(DATE, 50.5, 30.5).altitude < 0
        assert helioluna.get_sun_times(DATE, 50.5, 30.5, height=2000).sunrise is not None

    def test_moon(self):
        illum = helioluna.get_moon_illumination(DATE)
        assert helioluna.classify_phase(illum.phase) == helioluna.MoonPhase.WANING_CRESCENT
        assert helioluna.phase_name(illum.phase) == "Waning Crescent"
        assert helioluna.get_moon_position(DATE, 50.5, 30.5).distance > 0
        assert helioluna.get_moon_times(date(2013, 3, 4), 50.5, 30.5).rise is not None

    def test_exports(self):
        for name in helioluna.__all__:
            assert hasattr(helioluna, name)
