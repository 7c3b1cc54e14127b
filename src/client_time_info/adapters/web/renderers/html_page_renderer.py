"""HTML page renderer for the client info page."""

from __future__ import annotations

from pathlib import Path

from markupsafe import Markup
from starlette.templating import Jinja2Templates

from client_time_info.adapters.config.app_config import AppConfig
from client_time_info.domain.contracts.page_renderer import PageRendererProtocol
from client_time_info.domain.models import ClientInfo, ServerTime

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
PAGE_TEMPLATE_NAME = "index.html"


class HtmlPageRenderer(PageRendererProtocol):
    """Renders the client info page from a request snapshot.

    Values are autoescaped by the Jinja2 environment. With ``escape_html``
    disabled the client-supplied fields are marked safe and echoed verbatim.
    """

    def __init__(self, config: AppConfig, templates: Jinja2Templates | None = None) -> None:
        """Initialize the renderer.

        Args:
            config: Application configuration with page title and escaping settings.
            templates: Optional template collection, defaults to the packaged templates.
        """
        self.config = config
        self.templates = templates or Jinja2Templates(directory=str(TEMPLATES_DIR))

    def render(self, server_time: ServerTime, client_info: ClientInfo) -> str:
        """Render the page for one request."""
        client: dict[str, str] = client_info.model_dump()
        if not self.config.escape_html:
            client = {name: Markup(value) for name, value in client.items()}

        template = self.templates.get_template(PAGE_TEMPLATE_NAME)
        return template.render(
            title=self.config.title,
            server_time=server_time,
            client=client,
        )
