"""Web adapters for serving client info."""

from client_time_info.adapters.web.starlette_app import StarletteWebAdapter

__all__ = ["StarletteWebAdapter"]
