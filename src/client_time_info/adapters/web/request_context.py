"""Build a RequestContext from a Starlette request."""

from starlette.requests import Request

from client_time_info.domain.models import RequestContext

UNKNOWN_ADDRESS = "unknown"


def get_remote_address(request: Request) -> str:
    """Return the transport-level peer address of the connection."""
    if request.client and request.client.host:
        return request.client.host
    return UNKNOWN_ADDRESS


def build_request_context(request: Request) -> RequestContext:
    """Build the framework-independent request context for a handler.

    When a header is repeated, the first occurrence wins.
    """
    headers = {name: request.headers.get(name) for name in request.headers.keys()}
    return RequestContext(
        method=request.method,
        path=request.url.path,
        remote_address=get_remote_address(request),
        headers=headers,
    )
