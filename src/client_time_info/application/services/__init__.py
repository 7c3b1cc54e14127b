"""Application services."""

from client_time_info.application.services.client_info_service import ClientInfoService
from client_time_info.application.services.client_ip_resolver import resolve_client_ip

__all__ = ["ClientInfoService", "resolve_client_ip"]
