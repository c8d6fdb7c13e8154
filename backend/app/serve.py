"""Server Launcher: runs the ASGI app under uvicorn with settings-driven host/port.

Invariants:
    - Listens on PORT (default 3000)
    - SIGINT/SIGTERM: uvicorn stops accepting connections, waits for in-flight
      requests (bounded by shutdown_timeout_seconds), then runs the lifespan
      shutdown which drains the database pool
"""

import logging

import uvicorn

from app.config import get_settings

logger = logging.getLogger("app.serve")


def main() -> None:
    """Entry point for the account-service console script."""
    settings = get_settings()
    logger.info("Starting account service on %s:%s", settings.host, settings.port)
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=settings.shutdown_timeout_seconds,
    )


if __name__ == "__main__":
    main()
