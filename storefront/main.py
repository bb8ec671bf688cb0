"""
Storefront Service - REST API for the storefront.

All initialization logic is in app/factory.py.
"""
import logging

import uvicorn

from storefront.app import create_app
from storefront.config import Settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = Settings()
    app = create_app(settings)

    config = uvicorn.Config(
        app,
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=True,
        timeout_keep_alive=30,
        timeout_graceful_shutdown=30,
    )
    server = uvicorn.Server(config)

    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down...")
    finally:
        # Storage is closed by the lifespan handler in app/factory.py
        logger.info("Service stopped")


if __name__ == "__main__":
    main()
