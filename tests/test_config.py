"""Tests for environment-driven settings."""

import logging
from pathlib import Path

from quacktime.config import DEFAULT_DATA_DIR, get_settings
from quacktime.main import create_app
from quacktime.utils.datetime_helper import CalendarContext


def test_defaults(monkeypatch):
    for name in ("QUACKTIME_DATA_DIR", "QUACKTIME_SHARED_DIR", "QUACKTIME_TIMEZONE",
                 "QUACKTIME_TICK_INTERVAL", "QUACKTIME_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.data_dir == DEFAULT_DATA_DIR
    assert settings.shared_dir is None
    assert settings.timezone is None
    assert settings.tick_interval == 1.0
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("QUACKTIME_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("QUACKTIME_SHARED_DIR", str(tmp_path / "group"))
    monkeypatch.setenv("QUACKTIME_TIMEZONE", "Asia/Singapore")
    monkeypatch.setenv("QUACKTIME_TICK_INTERVAL", "0.5")
    monkeypatch.setenv("QUACKTIME_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.data_dir == tmp_path / "data"
    assert settings.shared_dir == Path(tmp_path / "group")
    assert settings.timezone == "Asia/Singapore"
    assert settings.tick_interval == 0.5
    assert settings.log_level == "DEBUG"


def test_unknown_timezone_falls_back_to_local():
    calendar = CalendarContext.from_name("Not/AZone")

    assert calendar.tz is not None


def test_create_app_from_environment_configures_logging(monkeypatch, tmp_path):
    monkeypatch.setenv("QUACKTIME_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("QUACKTIME_TIMEZONE", "UTC")
    monkeypatch.setenv("QUACKTIME_LOG_LEVEL", "WARNING")
    monkeypatch.delenv("QUACKTIME_SHARED_DIR", raising=False)
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level

    try:
        app = create_app()
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

    assert app.settings.data_dir == tmp_path
    assert app.todos.groups[0].name == "My Tasks"
    assert (tmp_path / "defaults.json").exists()
