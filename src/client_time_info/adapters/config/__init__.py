"""Configuration adapters."""

from client_time_info.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
