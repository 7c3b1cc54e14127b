"""Protocol for reading the current time."""

from datetime import datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """Protocol for a source of the current wall-clock time."""

    def now(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""
        ...
