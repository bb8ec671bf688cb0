"""
Dependency injection helpers for FastAPI routes.
"""
from .services import (
    ServiceContainer,
    get_services,
    get_storage,
    get_catalog_service,
    get_article_service,
    get_account_service,
    get_order_service,
    get_settings_service,
    get_inbox_service,
)

__all__ = [
    'ServiceContainer',
    'get_services',
    'get_storage',
    'get_catalog_service',
    'get_article_service',
    'get_account_service',
    'get_order_service',
    'get_settings_service',
    'get_inbox_service',
]
