"""Domain models for client time info."""

from client_time_info.domain.models.client_info import ClientInfo
from client_time_info.domain.models.request_context import RequestContext
from client_time_info.domain.models.server_time import ServerTime

__all__ = [
    "ClientInfo",
    "RequestContext",
    "ServerTime",
]
