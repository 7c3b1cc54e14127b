"""Tests for configuration adapter."""

import pytest

from client_time_info.adapters.config import AppConfig


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig(_env_file=None)

    assert config.host == "0.0.0.0"
    assert config.port == 8083
    assert config.timezone is None
    assert config.escape_html is True
    assert config.log_level == "INFO"


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("TIMEZONE", "Europe/Madrid")
    monkeypatch.setenv("ESCAPE_HTML", "false")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = AppConfig(_env_file=None)

    assert config.host == "127.0.0.1"
    assert config.port == 9000
    assert config.timezone == "Europe/Madrid"
    assert config.escape_html is False
    assert config.log_level == "DEBUG"


def test_config_validates_timezone(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unknown timezone, when loading config, then validation error is raised."""
    monkeypatch.setenv("TIMEZONE", "Mars/Olympus_Mons")

    with pytest.raises(ValueError, match="timezone must be a valid IANA timezone name"):
        AppConfig(_env_file=None)


def test_config_treats_empty_timezone_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an empty TIMEZONE, when loading config, then server local time is used."""
    monkeypatch.setenv("TIMEZONE", "")

    config = AppConfig(_env_file=None)

    assert config.timezone is None


def test_config_validates_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unknown log level, when loading config, then validation error is raised."""
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValueError, match="log_level must be one of"):
        AppConfig(_env_file=None)


@pytest.mark.parametrize(
    ("log_level", "expected"),
    [("warn", "WARNING"), ("FATAL", "CRITICAL"), ("Warning", "WARNING"), ("critical", "CRITICAL")],
)
def test_config_normalises_log_level_aliases(
    monkeypatch: pytest.MonkeyPatch, log_level: str, expected: str
) -> None:
    """Given a log level alias, when loading config, then the canonical name is stored."""
    monkeypatch.setenv("LOG_LEVEL", log_level)

    config = AppConfig(_env_file=None)

    assert config.log_level == expected


@pytest.mark.parametrize("log_level", ["NOTSET", "trace"])
def test_config_rejects_levels_uvicorn_cannot_use(
    monkeypatch: pytest.MonkeyPatch, log_level: str
) -> None:
    """Given a level the server cannot run with, when loading config, then validation fails."""
    monkeypatch.setenv("LOG_LEVEL", log_level)

    with pytest.raises(ValueError, match="log_level must be one of"):
        AppConfig(_env_file=None)
