"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from helioluna.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("LATITUDE", "LONGITUDE", "HEIGHT_M", "LOG_LEVEL"):
            monkeypatch.delenv(f"HELIOLUNA_{name}", raising=False)
        s = Settings(_env_file=None)
        assert s.latitude == 0.0
        assert s.longitude == 0.0
        assert s.height_m == 0.0
        assert s.log_level == "WARNING"

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("HELIOLUNA_LATITUDE", "50.5")
        monkeypatch.setenv("HELIOLUNA_LONGITUDE", "30.5")
        monkeypatch.setenv("HELIOLUNA_HEIGHT_M", "2000")
        s = Settings(_env_file=None)
        assert s.latitude == 50.5
        assert s.longitude == 30.5
        assert s.height_m == 2000.0

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("HELIOLUNA_LOG_LEVEL", " debug ")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("HELIOLUNA_LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
