"""Request context domain model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class RequestContext:
    """Framework-independent view of an inbound HTTP request.

    Header names are normalised to lower case on construction, so lookups
    through ``header`` are case-insensitive.
    """

    method: str
    path: str
    remote_address: str
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        normalized = {name.lower(): value for name, value in self.headers.items()}
        object.__setattr__(self, "headers", MappingProxyType(normalized))

    def header(self, name: str) -> str | None:
        """Return the value of header ``name`` or None when it was not sent."""
        return self.headers.get(name.lower())

    @property
    def user_agent(self) -> str:
        """User-Agent header, empty when the client did not send one."""
        return self.header("user-agent") or ""
