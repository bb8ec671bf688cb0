"""
Service container for dependency injection.
Builds the storage backend once and exposes it, and the services that use it,
to route handlers.
"""
import logging

from fastapi import Depends, Request

from storefront.config import Settings
from storefront.services import (
    AccountService,
    ArticleService,
    CatalogService,
    InboxService,
    OrderService,
    SettingsService,
)
from storefront.storage import StorageInterface, create_storage

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Container for all application services."""

    def __init__(self, settings: Settings, storage: StorageInterface = None):
        self.settings = settings
        self.storage = storage if storage is not None else create_storage(settings)

        self.catalog = CatalogService(self.storage)
        self.articles = ArticleService(self.storage)
        self.accounts = AccountService(self.storage)
        self.orders = OrderService(self.storage)
        self.site_settings = SettingsService(self.storage)
        self.inbox = InboxService(self.storage)

    async def close(self) -> None:
        await self.storage.close()
        logger.info("Storage closed")


def get_services(request: Request) -> ServiceContainer:
    """Get the service container attached to the running application."""
    return request.app.state.services


def get_storage(services: ServiceContainer = Depends(get_services)) -> StorageInterface:
    return services.storage


def get_catalog_service(services: ServiceContainer = Depends(get_services)) -> CatalogService:
    return services.catalog


def get_article_service(services: ServiceContainer = Depends(get_services)) -> ArticleService:
    return services.articles


def get_account_service(services: ServiceContainer = Depends(get_services)) -> AccountService:
    return services.accounts


def get_order_service(services: ServiceContainer = Depends(get_services)) -> OrderService:
    return services.orders


def get_settings_service(services: ServiceContainer = Depends(get_services)) -> SettingsService:
    return services.site_settings


def get_inbox_service(services: ServiceContainer = Depends(get_services)) -> InboxService:
    return services.inbox
