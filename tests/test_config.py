"""
Tests for environment-driven settings and backend selection.
"""
import os

import pytest

from storefront.config import Settings
from storefront.storage import MemoryStorage, SQLStorage, create_storage


def test_defaults(monkeypatch):
    for name in ("STOREFRONT_STORAGE_BACKEND", "STOREFRONT_DB_PATH", "STOREFRONT_DATABASE_URL",
                 "STOREFRONT_SEED_DATA", "STOREFRONT_DB_AUTO_MIGRATE", "STOREFRONT_PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.storage_backend == "memory"
    assert settings.seed_data is True
    assert settings.auto_migrate is True
    assert settings.port == 8000
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("STOREFRONT_STORAGE_BACKEND", "SQLite")
    monkeypatch.setenv("STOREFRONT_DB_PATH", "/tmp/shop.db")
    monkeypatch.setenv("STOREFRONT_SEED_DATA", "false")
    monkeypatch.setenv("STOREFRONT_PORT", "9100")

    settings = Settings()

    assert settings.storage_backend == "sqlite"
    assert settings.connection_target == "/tmp/shop.db"
    assert settings.seed_data is False
    assert settings.port == 9100


def test_explicit_arguments_override_environment(monkeypatch):
    monkeypatch.setenv("STOREFRONT_STORAGE_BACKEND", "sqlite")

    settings = Settings(storage_backend="memory", seed_data=False)

    assert settings.storage_backend == "memory"
    assert settings.seed_data is False


def test_unknown_backend_is_rejected():
    with pytest.raises(ValueError, match="Unknown storage backend"):
        Settings(storage_backend="redis")


def test_postgresql_requires_database_url(monkeypatch):
    monkeypatch.delenv("STOREFRONT_DATABASE_URL", raising=False)

    with pytest.raises(ValueError, match="STOREFRONT_DATABASE_URL"):
        Settings(storage_backend="postgresql")

    settings = Settings(storage_backend="postgresql", database_url="dbname=shop")
    assert settings.connection_target == "dbname=shop"


def test_create_storage_memory():
    storage = create_storage(Settings(storage_backend="memory", seed_data=False))

    assert isinstance(storage, MemoryStorage)
    assert storage.name == "memory"


def test_create_storage_sqlite(temp_dir):
    db_path = os.path.join(temp_dir, "shop.db")

    storage = create_storage(Settings(storage_backend="sqlite", db_path=db_path))

    assert isinstance(storage, SQLStorage)
    assert storage.name == "sqlite"
    assert os.path.exists(db_path)
