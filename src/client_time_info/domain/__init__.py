"""Domain layer - request value objects and ports."""

from client_time_info.domain.models import ClientInfo, RequestContext, ServerTime
from client_time_info.domain.ports import WebAdapter

__all__ = [
    "ClientInfo",
    "RequestContext",
    "ServerTime",
    "WebAdapter",
]
