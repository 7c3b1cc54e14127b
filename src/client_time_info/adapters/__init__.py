"""Adapters layer - configuration, clock and HTTP surface."""

from client_time_info.adapters.clock import SystemClock
from client_time_info.adapters.config import AppConfig

__all__ = ["AppConfig", "SystemClock"]
