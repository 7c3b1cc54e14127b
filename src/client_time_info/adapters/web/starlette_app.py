"""Starlette web adapter serving the client info endpoints."""

from __future__ import annotations

import logging
from typing import Any

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, Response
from starlette.routing import Route

from client_time_info.adapters.config import AppConfig
from client_time_info.application.services import ClientInfoService
from client_time_info.domain.contracts import PageRendererProtocol
from client_time_info.domain.ports import WebAdapter

from .renderers import HtmlPageRenderer, build_api_payload
from .request_context import build_request_context

logger = logging.getLogger(__name__)


class StarletteWebAdapter(WebAdapter):
    """Starlette-based web adapter for the HTML page and JSON API."""

    def __init__(
        self,
        service: ClientInfoService,
        config: AppConfig,
        renderer: PageRendererProtocol | None = None,
    ) -> None:
        """Initialize the web adapter.

        Args:
            service: Service producing the per-request snapshot.
            config: Application configuration.
            renderer: Optional HTML renderer, defaults to HtmlPageRenderer.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        if not callable(getattr(service, "snapshot", None)):
            raise TypeError("service must provide a snapshot() method")

        self.service = service
        self.config = config
        self.renderer = renderer or HtmlPageRenderer(config)
        self._server: Any | None = None

    async def html_page(self, request: Request) -> Response:
        """Render the client info page."""
        context = build_request_context(request)
        server_time, client_info = self.service.snapshot(context)
        html = self.renderer.render(server_time, client_info)
        logger.info(f"IP {client_info.ip} - {client_info.path}")
        return HTMLResponse(html)

    async def api(self, request: Request) -> Response:
        """Return the client info as JSON."""
        context = build_request_context(request)
        server_time, client_info = self.service.snapshot(context)
        logger.info(f"API hit from {client_info.ip}")
        return JSONResponse(build_api_payload(server_time, client_info))

    def create_app(self) -> Starlette:
        """Create the Starlette application with all routes registered."""
        routes = [
            Route("/", self.html_page, methods=["GET"]),
            Route("/api", self.api, methods=["GET"]),
        ]
        return Starlette(routes=routes)

    async def start(self) -> None:
        """Start the web server."""
        import uvicorn

        app = self.create_app()
        logger.info(
            f"Serving on http://{self.config.host}:{self.config.port} "
            f"(timezone: {self.config.timezone or 'server local'})"
        )
        config = uvicorn.Config(
            app,
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level.lower(),
        )
        self._server = uvicorn.Server(config)

        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        if self._server is not None:
            self._server.should_exit = True
            self._server = None
        logger.info("Web server stopped")
