"""Entry point for serving the Bookstore API.

Host and port are read from ``BOOKSTORE_HOST`` and ``BOOKSTORE_PORT``
(see ``bookstore_api.app.core.config``).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from bookstore_api.app.core.config import settings


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app="bookstore_api.app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
