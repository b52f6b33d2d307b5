"""Entry point for the Meetup API.

Reads configuration from the environment (or a ``.env`` file in the
current directory), then serves the application with Uvicorn on the
address given by ``SOCKET_ADDR``.  ``SOCKET_ADDR`` and
``DATABASE_URL`` are required; see ``.env.example``.

Usage:
    python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from meetup_api.app.core.config import Settings
from meetup_api.app.core.errors import ConfigurationError
from meetup_api.app.main import create_app


async def serve(settings: Settings) -> None:
    """Run the API server until it is stopped."""
    app = create_app(settings)
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("Listening on http://%s", settings.socket_addr)
    await server.serve()


def main() -> int:
    try:
        settings = Settings.from_environment()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    try:
        asyncio.run(serve(settings))
    except (KeyboardInterrupt, SystemExit):
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
