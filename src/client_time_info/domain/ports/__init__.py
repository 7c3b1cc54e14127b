"""Ports (interfaces) for the ports-and-adapters architecture."""

from client_time_info.domain.ports.web_adapter import WebAdapter

__all__ = ["WebAdapter"]
