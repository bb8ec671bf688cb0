"""
Storage abstraction layer.
Provides one interface for data persistence with interchangeable backends.
"""
import logging

from storefront.config import Settings
from .interface import StorageInterface
from .memory_storage import MemoryStorage
from .sql_storage import SQLStorage

logger = logging.getLogger(__name__)


def create_storage(settings: Settings) -> StorageInterface:
    """
    Build the storage backend selected by configuration.

    Called once at startup; the returned instance is used for the lifetime of
    the process.
    """
    if settings.storage_backend == "memory":
        storage = MemoryStorage(seed=settings.seed_data)
    else:
        storage = SQLStorage(
            settings.connection_target,
            db_type=settings.storage_backend,
            auto_migrate=settings.auto_migrate,
        )
    logger.info(f"Using {storage.name} storage backend")
    return storage


__all__ = ['StorageInterface', 'MemoryStorage', 'SQLStorage', 'create_storage']
