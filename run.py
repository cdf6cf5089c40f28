"""Entry point for the Todo API server.

Serves ``todo_api.app.main:app`` with Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (see
``todo_api.app.core.config``); defaults are ``0.0.0.0`` and ``8000``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from todo_api.app.core.config import settings
from todo_api.app.main import app


async def main() -> None:
    """Start the API server and wait until it stops."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
