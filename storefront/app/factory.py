"""
Application factory - creates and configures the FastAPI application.
This isolates all initialization logic from main.py.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from storefront.api.routes import api_router, health_router
from storefront.config import Settings
from storefront.dependencies.services import ServiceContainer
from storefront.exceptions.handlers import setup_exception_handlers
from storefront.monitoring import MetricsMiddleware, get_request_id
from storefront.storage import StorageInterface

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] - %(message)s'


class RequestIDFilter(logging.Filter):
    """Filter to add request ID to log records."""

    def filter(self, record):
        record.request_id = get_request_id() or '-'
        return True


class SafeFormatter(logging.Formatter):
    """Formatter that tolerates records logged before the filter ran."""

    def format(self, record):
        if not hasattr(record, 'request_id'):
            record.request_id = '-'
        return super().format(record)


def setup_logging(log_level: str = "INFO") -> None:
    """Setup structured logging with request ID support."""
    handler = logging.StreamHandler()
    handler.addFilter(RequestIDFilter())
    handler.setFormatter(SafeFormatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        handlers=[handler],
        force=True,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the service container on startup and release storage on shutdown."""
    logger = logging.getLogger(__name__)
    logger.info("Application starting up...")

    services = getattr(app.state, "services", None)
    if services is None:
        services = ServiceContainer(app.state.settings)
        app.state.services = services
    logger.info(f"Services initialized ({services.storage.name} storage)")

    yield

    logger.info("Application shutting down...")
    await services.close()
    logger.info("Shutdown complete")


def create_app(settings: Optional[Settings] = None, storage: Optional[StorageInterface] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Service settings; read from the environment when omitted
        storage: Prebuilt storage backend, used instead of the configured one

    Returns:
        Configured FastAPI app instance ready to run.
    """
    settings = settings or Settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Storefront Service",
        description="Catalog, orders and content API for the storefront",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    if storage is not None:
        app.state.services = ServiceContainer(settings, storage=storage)

    app.add_middleware(MetricsMiddleware)
    setup_exception_handlers(app)

    app.include_router(api_router)
    app.include_router(health_router)

    return app
