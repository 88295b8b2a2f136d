"""Tests for the pydantic result schemas."""

import json
import math
from datetime import date, datetime, timezone

from helioluna.schemas.astronomy import (
    AstronomyReport,
    MoonIlluminationData,
    MoonPositionData,
    MoonTimesData,
    SunData,
    SunPositionData,
    SunTimesData,
)
from helioluna.services import moon, sun

UTC = timezone.utc
DATE = datetime(2013, 3, 5, tzinfo=UTC)
LAT = 50.5
LNG = 30.5


class TestSunSchemas:
    def test_position_values_unchanged(self):
        pos = sun.get_position(DATE, LAT, LNG)
        data = SunPositionData.from_result(pos)
        assert data.azimuth == pos.azimuth
        assert data.altitude == pos.altitude
        assert data.altitude_deg == math.degrees(pos.altitude)

    def test_times_values_unchanged(self):
        times = sun.get_times(DATE, LAT, LNG)
        data = SunTimesData.from_result(times)
        assert data.sunrise == times.sunrise
        assert data.nadir == times.nadir
        assert data.day_length_seconds == times.day_length.total_seconds()

    def test_missing_phase_serializes_as_null(self):
        times = sun.get_times(date(2013, 12, 21), 89.0, 0.0)
        payload = json.loads(SunTimesData.from_result(times).model_dump_json())
        assert payload["sunrise"] is None
        assert payload["day_length_seconds"] is None
        assert payload["solar_noon"].startswith("2013-12-21")


class TestMoonSchemas:
    def test_position_values_unchanged(self):
        pos = moon.get_position(DATE, LAT, LNG)
        data = MoonPositionData.from_result(pos)
        assert data.distance == pos.distance
        assert data.parallactic_angle == pos.parallactic_angle

    def test_illumination_has_phase_name(self):
        data = MoonIlluminationData.from_result(moon.get_illumination(DATE))
        assert data.phase_name == "Waning Crescent"
        assert data.fraction == moon.get_illumination(DATE).fraction

    def test_times(self):
        times = moon.get_times(date(2013, 3, 4), LAT, LNG)
        data = MoonTimesData.from_result(times)
        assert data.rise == times.rise
        assert data.set == times.set
        assert data.always_up is False


class TestAstronomyReport:
    def test_json_round_trip(self):
        report = AstronomyReport(
            at=DATE,
            latitude=LAT,
            longitude=LNG,
            sun=SunData(
                position=SunPositionData.from_result(sun.get_position(DATE, LAT, LNG)),
                times=SunTimesData.from_result(sun.get_times(DATE, LAT, LNG)),
            ),
        )
        restored = AstronomyReport.model_validate_json(report.model_dump_json())
        assert restored == report
        assert restored.moon is None
