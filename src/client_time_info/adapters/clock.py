"""System clock adapter."""

from datetime import datetime
from zoneinfo import ZoneInfo

from client_time_info.adapters.config.app_config import AppConfig
from client_time_info.domain.contracts.clock import ClockProtocol


class SystemClock(ClockProtocol):
    """Reads the wall clock in the configured timezone."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize the clock.

        Args:
            config: Application configuration with the optional timezone setting.
        """
        self._timezone = ZoneInfo(config.timezone) if config.timezone else None

    def now(self) -> datetime:
        """Return the current time, in server local time when no timezone is configured."""
        if self._timezone is None:
            return datetime.now().astimezone()
        return datetime.now(self._timezone)
