"""Shared fixtures for client time info tests."""

from datetime import datetime, timedelta, timezone

import pytest

from client_time_info.adapters.config import AppConfig
from client_time_info.application.services import ClientInfoService

# 2024-03-15 14:30:45 CET (a Friday), 1710509445 seconds since the epoch
FIXED_NOW = datetime(2024, 3, 15, 14, 30, 45, 750000, tzinfo=timezone(timedelta(hours=1)))


class FixedClock:
    """Clock returning a constant instant."""

    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host environment settings out of AppConfig."""
    for name in ("HOST", "PORT", "TIMEZONE", "TITLE", "ESCAPE_HTML", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(_env_file=None)


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def service(fixed_clock: FixedClock) -> ClientInfoService:
    return ClientInfoService(fixed_clock)
