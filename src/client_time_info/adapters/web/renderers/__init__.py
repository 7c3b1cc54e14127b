"""Response renderers."""

from client_time_info.adapters.web.renderers.html_page_renderer import HtmlPageRenderer
from client_time_info.adapters.web.renderers.json_payload import build_api_payload

__all__ = ["HtmlPageRenderer", "build_api_payload"]
