"""Service producing the per-request time and client snapshot."""

from client_time_info.application.services.client_ip_resolver import resolve_client_ip
from client_time_info.domain.contracts.clock import ClockProtocol
from client_time_info.domain.models import ClientInfo, RequestContext, ServerTime


class ClientInfoService:
    """Builds ServerTime and ClientInfo for an inbound request."""

    def __init__(self, clock: ClockProtocol) -> None:
        """Initialize the service.

        Args:
            clock: Source of the current time.
        """
        self.clock = clock

    def server_time(self) -> ServerTime:
        """Capture the current time once and derive all its representations."""
        return ServerTime.from_datetime(self.clock.now())

    def client_info(self, context: RequestContext) -> ClientInfo:
        """Resolve the client identity for a request."""
        return ClientInfo(
            ip=resolve_client_ip(context),
            user_agent=context.user_agent,
            method=context.method,
            path=context.path,
        )

    def snapshot(self, context: RequestContext) -> tuple[ServerTime, ClientInfo]:
        """Return the server time and client info for a request."""
        return self.server_time(), self.client_info(context)
