"""Entry point for running the Simple Health Data Server.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``3000``).

Usage:
    health-data-api
    python -m health_data_api.run
"""
import asyncio
import logging

from uvicorn import Config, Server

from health_data_api.app.core.config import settings
from health_data_api.app.core.logging_config import uvicorn_log_config
from health_data_api.app.main import app

logger = logging.getLogger(__name__)


def build_server() -> Server:
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=uvicorn_log_config(settings.log_level),
    )
    return Server(config)


async def serve() -> None:
    """Start uvicorn and block until it shuts down."""
    server = build_server()
    logger.info("Server running on port %s", settings.port)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(serve())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
