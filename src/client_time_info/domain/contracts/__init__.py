"""Contracts (protocols) the application layer depends on."""

from client_time_info.domain.contracts.clock import ClockProtocol
from client_time_info.domain.contracts.page_renderer import PageRendererProtocol

__all__ = ["ClockProtocol", "PageRendererProtocol"]
