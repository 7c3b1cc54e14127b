"""JSON payload for the /api endpoint."""

from typing import Any

from client_time_info.domain.models import ClientInfo, ServerTime


def build_api_payload(server_time: ServerTime, client_info: ClientInfo) -> dict[str, Any]:
    """Build the API response body."""
    return {
        "timestamp": server_time.iso8601,
        "unix": server_time.unix_seconds,
        "ip": client_info.ip,
        "method": client_info.method,
        "path": client_info.path,
    }
