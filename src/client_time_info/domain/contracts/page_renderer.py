"""Protocol for rendering the client info page."""

from typing import Protocol

from client_time_info.domain.models.client_info import ClientInfo
from client_time_info.domain.models.server_time import ServerTime


class PageRendererProtocol(Protocol):
    """Protocol for turning a request snapshot into an HTML document."""

    def render(self, server_time: ServerTime, client_info: ClientInfo) -> str:
        """Render the page.

        Args:
            server_time: Time captured for the request.
            client_info: Resolved client identity.

        Returns:
            The complete HTML document.
        """
        ...
