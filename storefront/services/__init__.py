"""
Service layer - business logic independent of the HTTP framework.
"""
from .account_service import AccountService
from .article_service import ArticleService
from .catalog_service import CatalogService
from .inbox_service import InboxService
from .order_service import OrderService
from .settings_service import SettingsService

__all__ = [
    'AccountService',
    'ArticleService',
    'CatalogService',
    'InboxService',
    'OrderService',
    'SettingsService',
]
