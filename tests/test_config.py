# tests/test_config.py

import pytest

from gregcal.config import DEFAULT_FORMAT, DEFAULT_LOCALTIME, load_settings


@pytest.fixture
def fresh_settings():
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


def test_defaults(monkeypatch, fresh_settings):
    for name in ("GREGCAL_LOCALTIME", "GREGCAL_FORMAT", "GREGCAL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    s = load_settings()
    assert s.localtime_path == DEFAULT_LOCALTIME
    assert s.default_format == DEFAULT_FORMAT
    assert s.log_level == "WARNING"


def test_environment_overrides(monkeypatch, fresh_settings):
    monkeypatch.setenv("GREGCAL_LOCALTIME", "/tmp/localtime")
    monkeypatch.setenv("GREGCAL_FORMAT", "{:D} {:m}")
    monkeypatch.setenv("GREGCAL_LOG_LEVEL", "debug")
    s = load_settings()
    assert s.localtime_path == "/tmp/localtime"
    assert s.default_format == "{:D} {:m}"
    assert s.log_level == "DEBUG"


def test_blank_values_fall_back(monkeypatch, fresh_settings):
    monkeypatch.setenv("GREGCAL_LOCALTIME", "   ")
    monkeypatch.setenv("GREGCAL_FORMAT", "")
    s = load_settings()
    assert s.localtime_path == DEFAULT_LOCALTIME
    assert s.default_format == DEFAULT_FORMAT


def test_settings_are_cached(monkeypatch, fresh_settings):
    monkeypatch.setenv("GREGCAL_FORMAT", "{:Y}")
    first = load_settings()
    monkeypatch.setenv("GREGCAL_FORMAT", "{:D}")
    assert load_settings() is first
