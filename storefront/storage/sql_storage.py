"""
SQL implementation of the storage interface.

Each operation opens its own connection, runs its statements and closes the
connection again. The blocking driver calls run in the default executor so
the coroutine contract matches the in-memory backend. Ids, timestamps and
referential integrity are left to the database engine; driver errors
propagate unchanged.
"""
import asyncio
import functools
import json
import logging
import os
import time
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel

from storefront.db_adapter import BaseDatabaseAdapter, DatabaseType, get_database_adapter
from storefront.models import (
    User, UserCreate,
    Product, ProductCreate, ProductUpdate, ProductQuery,
    Category, CategoryCreate,
    Article, ArticleCreate, ArticleUpdate, ArticleQuery,
    Order, OrderCreate, OrderLine, OrderItem, OrderItemCreate,
    Subscriber, SubscriberCreate,
    Contact, ContactCreate,
    Setting, SettingCreate, SettingUpdate,
)
from .interface import StorageInterface
from .schema import JSON_COLUMNS, SCHEMA_STATEMENTS

logger = logging.getLogger(__name__)

# Query performance threshold (seconds) - queries slower than this will be logged
QUERY_SLOW_THRESHOLD = float(os.getenv("DB_QUERY_SLOW_THRESHOLD", "0.1"))
ENABLE_QUERY_LOGGING = os.getenv("DB_ENABLE_QUERY_LOGGING", "true").lower() == "true"

EntityT = TypeVar("EntityT", bound=BaseModel)

TIMESTAMP_COLUMNS = ("created_at", "updated_at")


def as_utc(value: datetime) -> datetime:
    """Timestamps are written in UTC; SQLite hands them back without an offset."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SQLStorage(StorageInterface):
    """Relational storage over SQLite or PostgreSQL."""

    def __init__(self, target: str, db_type: str = "sqlite", auto_migrate: bool = True):
        """
        Initialize the backend.

        Args:
            target: SQLite file path or PostgreSQL connection string
            db_type: 'sqlite' or 'postgresql'
            auto_migrate: Create missing tables now; otherwise the schema is
                assumed to be provisioned already
        """
        self.adapter: BaseDatabaseAdapter = get_database_adapter(target, db_type)
        self.db_type = self.adapter.db_type
        self.name = self.db_type.value
        if self.db_type is DatabaseType.SQLITE:
            self._ensure_db_directory(target)
        if auto_migrate:
            self._init_schema()

    @staticmethod
    def _ensure_db_directory(db_path: str) -> None:
        db_dir = os.path.dirname(os.path.abspath(db_path))
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

    def _init_schema(self) -> None:
        conn = self.adapter.connect()
        try:
            cursor = conn.cursor()
            for statement in SCHEMA_STATEMENTS:
                self._execute_with_logging(cursor, statement.format(now=self.adapter.now_expression))
            conn.commit()
            logger.info(f"Schema ready on {self.name} backend")
        finally:
            self.adapter.close(conn)

    # Low-level execution

    def _log_query(self, query: str, duration: float, rows: Optional[int] = None) -> None:
        if not ENABLE_QUERY_LOGGING:
            return
        log_level = logging.WARNING if duration >= QUERY_SLOW_THRESHOLD else logging.DEBUG
        query_preview = " ".join(query.split())[:200]
        message = f"Query executed in {duration:.4f}s"
        if rows is not None and rows >= 0:
            message += f" ({rows} rows)"
        logger.log(log_level, f"{message}: {query_preview}", extra={"duration": duration})

    def _execute_with_logging(self, cursor, query: str, params: Optional[Tuple] = None):
        start_time = time.time()
        result = self.adapter.execute(cursor, query, params)
        self._log_query(query, time.time() - start_time, cursor.rowcount)
        return result

    def _execute_insert(self, cursor, query: str, params: Tuple) -> int:
        """Run an INSERT and return the new row id (lastrowid or RETURNING)."""
        if self.db_type is DatabaseType.POSTGRESQL:
            query = query.rstrip().rstrip(";") + " RETURNING id"
            self._execute_with_logging(cursor, query, params)
            return cursor.fetchone()["id"]
        self._execute_with_logging(cursor, query, params)
        return cursor.lastrowid

    async def _run(self, func, *args):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, functools.partial(func, *args))

    # Row conversion

    @staticmethod
    def _encode(table: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        encoded = dict(fields)
        for column in JSON_COLUMNS.get(table, ()):
            if encoded.get(column) is not None:
                encoded[column] = json.dumps(encoded[column])
        return encoded

    @staticmethod
    def _decode(table: str, row: Any, entity_cls: Type[EntityT]) -> EntityT:
        data = dict(row)
        for column in JSON_COLUMNS.get(table, ()):
            if isinstance(data.get(column), str):
                data[column] = json.loads(data[column])
        entity = entity_cls.model_validate(data)
        for column in TIMESTAMP_COLUMNS:
            value = getattr(entity, column, None)
            if isinstance(value, datetime):
                setattr(entity, column, as_utc(value))
        return entity

    # Generic table operations (blocking; called through _run)

    def _fetch_one(self, table: str, entity_cls: Type[EntityT], where: str, params: Tuple) -> Optional[EntityT]:
        conn = self.adapter.connect()
        try:
            cursor = conn.cursor()
            self._execute_with_logging(cursor, f"SELECT * FROM {table} WHERE {where} ORDER BY id LIMIT 1", params)
            row = cursor.fetchone()
            return self._decode(table, row, entity_cls) if row else None
        finally:
            self.adapter.close(conn)

    def _fetch_all(
        self,
        table: str,
        entity_cls: Type[EntityT],
        filters: Iterable[Tuple[str, Any]] = (),
        order_by: str = "id ASC",
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[EntityT]:
        clauses = []
        params: List[Any] = []
        for column, value in filters:
            clauses.append(f"{column} = ?")
            params.append(value)

        query = f"SELECT * FROM {table}"
        if clauses:
            query += " WHERE " + " AND ".join(clauses)
        query += f" ORDER BY {order_by}"
        if limit:
            query += " LIMIT ?"
            params.append(limit)
        if offset:
            if not limit and self.db_type is DatabaseType.SQLITE:
                # SQLite only accepts OFFSET after a LIMIT clause.
                query += " LIMIT -1"
            query += " OFFSET ?"
            params.append(offset)

        conn = self.adapter.connect()
        try:
            cursor = conn.cursor()
            self._execute_with_logging(cursor, query, tuple(params))
            return [self._decode(table, row, entity_cls) for row in cursor.fetchall()]
        finally:
            self.adapter.close(conn)

    def _insert_row(self, cursor, table: str, fields: Dict[str, Any]) -> int:
        encoded = self._encode(table, fields)
        columns = ", ".join(encoded)
        placeholders = ", ".join("?" for _ in encoded)
        return self._execute_insert(
            cursor, f"INSERT INTO {table} ({columns}) VALUES ({placeholders})", tuple(encoded.values())
        )

    def _create(self, table: str, entity_cls: Type[EntityT], fields: Dict[str, Any]) -> EntityT:
        conn = self.adapter.connect()
        try:
            cursor = conn.cursor()
            row_id = self._insert_row(cursor, table, fields)
            conn.commit()
            self._execute_with_logging(cursor, f"SELECT * FROM {table} WHERE id = ?", (row_id,))
            entity = self._decode(table, cursor.fetchone(), entity_cls)
            logger.debug(f"Inserted {table} row {row_id}")
            return entity
        finally:
            self.adapter.close(conn)

    def _update(
        self,
        table: str,
        entity_cls: Type[EntityT],
        row_id: int,
        changes: Dict[str, Any],
        touch_updated_at: bool = False,
    ) -> Optional[EntityT]:
        encoded = self._encode(table, changes)
        assignments = [f"{column} = ?" for column in encoded]
        if touch_updated_at:
            assignments.append(f"updated_at = {self.adapter.now_expression}")

        conn = self.adapter.connect()
        try:
            cursor = conn.cursor()
            if assignments:
                self._execute_with_logging(
                    cursor,
                    f"UPDATE {table} SET {', '.join(assignments)} WHERE id = ?",
                    tuple(encoded.values()) + (row_id,),
                )
                conn.commit()
            self._execute_with_logging(cursor, f"SELECT * FROM {table} WHERE id = ?", (row_id,))
            row = cursor.fetchone()
            return self._decode(table, row, entity_cls) if row else None
        finally:
            self.adapter.close(conn)

    def _delete(self, table: str, row_id: int) -> bool:
        conn = self.adapter.connect()
        try:
            cursor = conn.cursor()
            self._execute_with_logging(cursor, f"DELETE FROM {table} WHERE id = ?", (row_id,))
            deleted = cursor.rowcount > 0
            conn.commit()
            return deleted
        finally:
            self.adapter.close(conn)

    def _ping(self) -> None:
        conn = self.adapter.connect()
        try:
            cursor = conn.cursor()
            self.adapter.execute(cursor, "SELECT 1")
            cursor.fetchone()
        finally:
            self.adapter.close(conn)

    def _create_order_with_items(self, order: OrderCreate, lines: List[OrderLine]) -> Order:
        conn = self.adapter.connect()
        try:
            cursor = conn.cursor()
            try:
                order_id = self._insert_row(cursor, "orders", order.model_dump())
                for line in lines:
                    self._insert_row(cursor, "order_items", {**line.model_dump(), "order_id": order_id})
                conn.commit()
            except Exception:
                conn.rollback()
                logger.warning(f"Rolled back order with {len(lines)} items", exc_info=True)
                raise
            self._execute_with_logging(cursor, "SELECT * FROM orders WHERE id = ?", (order_id,))
            logger.info(f"Created order {order_id} with {len(lines)} items")
            return self._decode("orders", cursor.fetchone(), Order)
        finally:
            self.adapter.close(conn)

    # Users
    async def get_user(self, user_id: int) -> Optional[User]:
        return await self._run(self._fetch_one, "users", User, "id = ?", (user_id,))

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return await self._run(self._fetch_one, "users", User, "username = ?", (username,))

    async def get_user_by_email(self, email: str) -> Optional[User]:
        return await self._run(self._fetch_one, "users", User, "email = ?", (email,))

    async def create_user(self, user: UserCreate) -> User:
        return await self._run(self._create, "users", User, user.model_dump())

    # Products
    async def get_product(self, product_id: int) -> Optional[Product]:
        return await self._run(self._fetch_one, "products", Product, "id = ?", (product_id,))

    async def get_products(self, options: Optional[ProductQuery] = None) -> List[Product]:
        options = options or ProductQuery()
        filters = []
        if options.category:
            filters.append(("category", options.category))
        if options.featured is not None:
            filters.append(("is_featured", options.featured))
        return await self._run(
            self._fetch_all, "products", Product, filters, "created_at DESC, id DESC", options.limit, options.offset
        )

    async def create_product(self, product: ProductCreate) -> Product:
        return await self._run(self._create, "products", Product, product.model_dump())

    async def update_product(self, product_id: int, product: ProductUpdate) -> Optional[Product]:
        return await self._run(self._update, "products", Product, product_id, product.model_dump(exclude_unset=True))

    async def delete_product(self, product_id: int) -> bool:
        return await self._run(self._delete, "products", product_id)

    # Categories
    async def get_categories(self) -> List[Category]:
        return await self._run(self._fetch_all, "categories", Category)

    async def get_category_by_slug(self, slug: str) -> Optional[Category]:
        return await self._run(self._fetch_one, "categories", Category, "slug = ?", (slug,))

    async def create_category(self, category: CategoryCreate) -> Category:
        return await self._run(self._create, "categories", Category, category.model_dump())

    # Articles
    async def get_article(self, article_id: int) -> Optional[Article]:
        return await self._run(self._fetch_one, "articles", Article, "id = ?", (article_id,))

    async def get_article_by_slug(self, slug: str) -> Optional[Article]:
        return await self._run(self._fetch_one, "articles", Article, "slug = ?", (slug,))

    async def get_articles(self, options: Optional[ArticleQuery] = None) -> List[Article]:
        options = options or ArticleQuery()
        filters = [("category", options.category)] if options.category else []
        return await self._run(
            self._fetch_all, "articles", Article, filters, "created_at DESC, id DESC", options.limit, options.offset
        )

    async def create_article(self, article: ArticleCreate) -> Article:
        return await self._run(self._create, "articles", Article, article.model_dump())

    async def update_article(self, article_id: int, article: ArticleUpdate) -> Optional[Article]:
        return await self._run(self._update, "articles", Article, article_id, article.model_dump(exclude_unset=True))

    async def delete_article(self, article_id: int) -> bool:
        return await self._run(self._delete, "articles", article_id)

    # Orders
    async def get_order(self, order_id: int) -> Optional[Order]:
        return await self._run(self._fetch_one, "orders", Order, "id = ?", (order_id,))

    async def get_user_orders(self, user_id: int) -> List[Order]:
        return await self._run(self._fetch_all, "orders", Order, [("user_id", user_id)], "created_at DESC, id DESC")

    async def create_order(self, order: OrderCreate) -> Order:
        return await self._run(self._create, "orders", Order, order.model_dump())

    async def create_order_with_items(self, order: OrderCreate, lines: List[OrderLine]) -> Order:
        return await self._run(self._create_order_with_items, order, lines)

    async def update_order_status(self, order_id: int, status: str) -> Optional[Order]:
        return await self._run(self._update, "orders", Order, order_id, {"status": status})

    # Order items
    async def get_order_items(self, order_id: int) -> List[OrderItem]:
        return await self._run(self._fetch_all, "order_items", OrderItem, [("order_id", order_id)])

    async def create_order_item(self, item: OrderItemCreate) -> OrderItem:
        return await self._run(self._create, "order_items", OrderItem, item.model_dump())

    # Subscribers
    async def get_subscribers(self) -> List[Subscriber]:
        return await self._run(self._fetch_all, "subscribers", Subscriber)

    async def get_subscriber_by_email(self, email: str) -> Optional[Subscriber]:
        return await self._run(self._fetch_one, "subscribers", Subscriber, "email = ?", (email,))

    async def create_subscriber(self, subscriber: SubscriberCreate) -> Subscriber:
        return await self._run(self._create, "subscribers", Subscriber, subscriber.model_dump())

    # Contacts
    async def get_contacts(self) -> List[Contact]:
        return await self._run(self._fetch_all, "contacts", Contact)

    async def create_contact(self, contact: ContactCreate) -> Contact:
        return await self._run(self._create, "contacts", Contact, contact.model_dump())

    # Settings
    async def get_settings(self, category: Optional[str] = None) -> List[Setting]:
        filters = [("category", category)] if category else []
        return await self._run(self._fetch_all, "settings", Setting, filters, "key ASC")

    async def get_setting_by_key(self, key: str) -> Optional[Setting]:
        return await self._run(self._fetch_one, "settings", Setting, "key = ?", (key,))

    async def create_setting(self, setting: SettingCreate) -> Setting:
        return await self._run(self._create, "settings", Setting, setting.model_dump())

    async def update_setting(self, setting_id: int, setting: SettingUpdate) -> Optional[Setting]:
        return await self._run(
            self._update, "settings", Setting, setting_id, setting.model_dump(exclude_unset=True), True
        )

    async def delete_setting(self, setting_id: int) -> bool:
        return await self._run(self._delete, "settings", setting_id)

    async def ping(self) -> None:
        await self._run(self._ping)

    async def close(self) -> None:
        self.adapter.dispose()
        logger.info(f"Closed {self.name} storage")
