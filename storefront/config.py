"""
Service configuration read from environment variables.
"""
import os
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


class Settings:
    """Runtime settings for the storefront service."""

    STORAGE_BACKENDS = ("memory", "sqlite", "postgresql")

    def __init__(
        self,
        storage_backend: Optional[str] = None,
        db_path: Optional[str] = None,
        database_url: Optional[str] = None,
        seed_data: Optional[bool] = None,
        auto_migrate: Optional[bool] = None,
    ):
        """
        Build settings, falling back to environment variables for anything
        not passed explicitly.

        Raises:
            ValueError: If the storage backend name is not recognised, or
                PostgreSQL is selected without a connection string.
        """
        self.storage_backend = (
            storage_backend or os.getenv("STOREFRONT_STORAGE_BACKEND", "memory")
        ).lower()
        self.db_path = db_path or os.getenv("STOREFRONT_DB_PATH", "./data/storefront.db")
        self.database_url = database_url or os.getenv("STOREFRONT_DATABASE_URL")
        self.seed_data = seed_data if seed_data is not None else _env_flag("STOREFRONT_SEED_DATA", "true")
        self.auto_migrate = (
            auto_migrate if auto_migrate is not None else _env_flag("STOREFRONT_DB_AUTO_MIGRATE", "true")
        )
        self.port = int(os.getenv("STOREFRONT_PORT", "8000"))
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

        if self.storage_backend not in self.STORAGE_BACKENDS:
            raise ValueError(
                f"Unknown storage backend: {self.storage_backend}. "
                f"Must be one of: {', '.join(self.STORAGE_BACKENDS)}"
            )
        if self.storage_backend == "postgresql" and not self.database_url:
            raise ValueError("STOREFRONT_DATABASE_URL is required for the postgresql backend")

    @property
    def connection_target(self) -> str:
        """Connection string or file path handed to the database adapter."""
        if self.storage_backend == "postgresql":
            return self.database_url
        return self.db_path

    def __repr__(self) -> str:
        return f"Settings(storage_backend={self.storage_backend!r}, db_path={self.db_path!r})"
