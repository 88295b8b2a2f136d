"""Tests for the command line interface."""

import argparse
import json
from datetime import datetime, timedelta, timezone

import pytest

from helioluna.cli import main, parse_when

UTC = timezone.utc
REFERENCE = ["--lat", "50.5", "--lng", "30.5", "--at", "2013-03-05"]


class TestParseWhen:
    def test_date_only_is_utc_midnight(self):
        assert parse_when("2013-03-05") == datetime(2013, 3, 5, tzinfo=UTC)

    def test_zulu_suffix(self):
        assert parse_when("2013-03-05T10:10:57Z") == datetime(2013, 3, 5, 10, 10, 57, tzinfo=UTC)

    def test_offset_converted_to_utc(self):
        when = parse_when("2013-03-05T02:00:00+02:00")
        assert when == datetime(2013, 3, 5, tzinfo=UTC)
        assert when.utcoffset() == timedelta(0)

    def test_invalid(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_when("yesterday")


class TestMain:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()

    def test_sun_json(self, capsys):
        assert main(["sun", *REFERENCE]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["moon"] is None
        assert payload["sun"]["times"]["sunrise"].startswith("2013-03-05T04:34:56")
        assert payload["sun"]["position"]["azimuth"] == pytest.approx(-2.5003175907168385, abs=1e-9)

    def test_sun_height(self, capsys):
        assert main(["sun", *REFERENCE, "--height", "2000"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["height"] == 2000
        assert payload["sun"]["times"]["sunset"].startswith("2013-03-05T15:56:46")

    def test_moon_json(self, capsys):
        assert main(["moon", "--lat", "50.5", "--lng", "30.5", "--at", "2013-03-04"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["sun"] is None
        assert payload["moon"]["times"]["rise"].startswith("2013-03-04T23:54:29")
        assert payload["moon"]["times"]["set"].startswith("2013-03-04T07:47:58")

    def test_report_text(self, capsys):
        assert main(["report", *REFERENCE, "--text"]) == 0
        out = capsys.readouterr().out
        assert "Sun" in out
        assert "Waning Crescent" in out
        assert "2013-03-05 10:10:57 UTC" in out

    def test_polar_text_shows_placeholder(self, capsys):
        assert main(["sun", "--lat", "89", "--lng", "0", "--at", "2013-12-21", "--text"]) == 0
        out = capsys.readouterr().out
        assert "Sunrise" in out
        assert "--" in out

    def test_bad_date_exits_with_usage_error(self):
        with pytest.raises(SystemExit) as exc:
            main(["sun", "--at", "not-a-date"])
        assert exc.value.code == 2
