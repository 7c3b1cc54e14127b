"""Server time domain model."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

HUMAN_READABLE_FORMAT = "%Y-%m-%d %H:%M:%S %A"


@dataclass(frozen=True)
class ServerTime:
    """Wall-clock time captured once at the start of handling a request."""

    human_readable: str
    iso8601: str
    unix_seconds: int

    @classmethod
    def from_datetime(cls, now: datetime) -> ServerTime:
        """Build all three representations from one instant.

        Naive datetimes are interpreted as local time so that the ISO-8601
        string always carries a UTC offset.
        """
        if now.tzinfo is None:
            now = now.astimezone()
        return cls(
            human_readable=now.strftime(HUMAN_READABLE_FORMAT),
            iso8601=now.isoformat(timespec="seconds"),
            unix_seconds=math.floor(now.timestamp()),
        )
