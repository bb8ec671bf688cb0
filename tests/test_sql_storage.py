"""
Tests for the SQL backend on SQLite: ordering, constraints, transactions
and persistence.
"""
import os
import sqlite3
from datetime import datetime, timedelta, timezone

import pytest

from helpers import make_product, make_user
from storefront.db_adapter import DatabaseType, PostgreSQLAdapter, SQLiteAdapter, get_database_adapter
from storefront.models import ArticleCreate, OrderCreate, OrderItemCreate, OrderLine, SubscriberCreate
from storefront.storage import SQLStorage
from storefront.storage.sql_storage import as_utc


@pytest.mark.asyncio
async def test_products_are_listed_newest_first(sqlite_storage):
    for name in ("First", "Second", "Third"):
        await sqlite_storage.create_product(make_product(name))

    products = await sqlite_storage.get_products()

    assert [p.name for p in products] == ["Third", "Second", "First"]


@pytest.mark.asyncio
async def test_articles_are_listed_newest_first(sqlite_storage):
    await sqlite_storage.create_article(ArticleCreate(title="Older", content="..."))
    await sqlite_storage.create_article(ArticleCreate(title="Newer", content="..."))

    assert [a.slug for a in await sqlite_storage.get_articles()] == ["newer", "older"]


@pytest.mark.asyncio
async def test_unique_email_is_enforced(sqlite_storage):
    await sqlite_storage.create_user(make_user(username="asha"))

    with pytest.raises(sqlite3.IntegrityError):
        await sqlite_storage.create_user(make_user(username="asha-2"))


@pytest.mark.asyncio
async def test_unique_subscriber_email_is_enforced(sqlite_storage):
    await sqlite_storage.create_subscriber(SubscriberCreate(email="news@kharidify.in"))

    with pytest.raises(sqlite3.IntegrityError):
        await sqlite_storage.create_subscriber(SubscriberCreate(email="news@kharidify.in"))


@pytest.mark.asyncio
async def test_order_item_requires_existing_order(sqlite_storage):
    product = await sqlite_storage.create_product(make_product())

    with pytest.raises(sqlite3.IntegrityError):
        await sqlite_storage.create_order_item(OrderItemCreate(order_id=999, product_id=product.id, quantity=1, price=1.0))


@pytest.mark.asyncio
async def test_create_order_with_items_rolls_back_on_failure(sqlite_storage):
    product = await sqlite_storage.create_product(make_product())
    lines = [
        OrderLine(product_id=product.id, quantity=1, price=89.0),
        OrderLine(product_id=999, quantity=1, price=10.0),
    ]

    with pytest.raises(sqlite3.IntegrityError):
        await sqlite_storage.create_order_with_items(OrderCreate(total=99.0), lines)

    assert await sqlite_storage.get_order(1) is None
    assert await sqlite_storage.get_order_items(1) == []


@pytest.mark.asyncio
async def test_data_persists_across_instances(temp_dir):
    db_path = os.path.join(temp_dir, "shop.db")
    first = SQLStorage(db_path)
    product = await first.create_product(make_product(sustainable_materials=["organic cotton"]))
    await first.close()

    second = SQLStorage(db_path)
    fetched = await second.get_product(product.id)

    assert fetched.name == product.name
    assert fetched.sustainable_materials == ["organic cotton"]


@pytest.mark.asyncio
async def test_without_auto_migrate_schema_is_not_created(temp_dir):
    storage = SQLStorage(os.path.join(temp_dir, "empty.db"), auto_migrate=False)

    with pytest.raises(sqlite3.OperationalError):
        await storage.get_products()


def test_creates_missing_database_directory(temp_dir):
    db_path = os.path.join(temp_dir, "nested", "dir", "shop.db")

    storage = SQLStorage(db_path)

    assert storage.name == "sqlite"
    assert os.path.exists(db_path)


def test_get_database_adapter():
    assert isinstance(get_database_adapter("x.db"), SQLiteAdapter)
    assert isinstance(get_database_adapter("dbname=shop", "postgresql"), PostgreSQLAdapter)
    assert get_database_adapter("x.db", "SQLite").db_type is DatabaseType.SQLITE

    with pytest.raises(ValueError, match="Unsupported database type"):
        get_database_adapter("x.db", "oracle")


def test_postgresql_query_normalization():
    adapter = PostgreSQLAdapter("dbname=shop")

    ddl = adapter.normalize_query("CREATE TABLE t (id INTEGER PRIMARY KEY AUTOINCREMENT, price REAL NOT NULL)")
    query = adapter.normalize_query("SELECT * FROM products WHERE category = ? AND is_featured = ?")

    assert ddl == "CREATE TABLE t (id SERIAL PRIMARY KEY, price DOUBLE PRECISION NOT NULL)"
    assert query == "SELECT * FROM products WHERE category = %s AND is_featured = %s"


def test_postgresql_timestamps_keep_their_zone():
    adapter = PostgreSQLAdapter("dbname=shop")

    ddl = adapter.normalize_query("created_at TIMESTAMP NOT NULL DEFAULT (CURRENT_TIMESTAMP)")

    assert ddl == "created_at TIMESTAMPTZ NOT NULL DEFAULT (CURRENT_TIMESTAMP)"


def test_as_utc():
    naive = datetime(2026, 3, 1, 12, 30)
    ist = datetime(2026, 3, 1, 18, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))

    assert as_utc(naive) == datetime(2026, 3, 1, 12, 30, tzinfo=timezone.utc)
    assert as_utc(ist).tzinfo == timezone.utc
    assert as_utc(ist).hour == 12
    assert as_utc(ist) == as_utc(naive)
