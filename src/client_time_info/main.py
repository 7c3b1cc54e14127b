"""Main entry point for the client time info server."""

import asyncio
import logging
import sys

from pydantic import ValidationError

from client_time_info.adapters.clock import SystemClock
from client_time_info.adapters.config import AppConfig
from client_time_info.adapters.web import StarletteWebAdapter
from client_time_info.application.services import ClientInfoService

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def load_config() -> AppConfig:
    """Load configuration once at startup, exiting on invalid settings."""
    try:
        return AppConfig()
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)


async def main() -> None:
    """Main application entry point."""
    configure_logging()
    config = load_config()
    logging.getLogger().setLevel(config.log_level)

    service = ClientInfoService(SystemClock(config))
    web_adapter = StarletteWebAdapter(service, config)

    try:
        await web_adapter.start()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        await web_adapter.stop()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
