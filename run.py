"""Entry point for the User Endpoint API.

Starts the FastAPI application with uvicorn.  Host and port come from
the ``API_HOST`` and ``API_PORT`` environment variables (defaults
``0.0.0.0`` and ``8000``); see ``user_endpoint_api/app/core/config.py``
for the remaining settings such as ``DATABASE_URL`` and ``LOG_LEVEL``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from user_endpoint_api.app.core.config import settings
from user_endpoint_api.app.core.logging_config import resolve_log_level
from user_endpoint_api.app.main import app


async def run_api() -> None:
    """Serve the API until the process is stopped."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=resolve_log_level(settings.log_level).lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("API stopped")


if __name__ == "__main__":
    main()
