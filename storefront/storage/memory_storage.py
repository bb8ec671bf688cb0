"""
In-memory implementation of the storage interface.

Each entity kind lives in its own dict keyed by id, with one id counter per
kind. Ids are never reused, even after a delete. Lookups are linear scans in
insertion order; there are no secondary indexes. Callers always receive
copies, and updates replace the stored entity rather than editing it.
"""
import logging
from datetime import datetime, UTC
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel

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
from .seed import SEED_ARTICLES, SEED_CATEGORIES, SEED_PRODUCTS

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)

ENTITY_KINDS = (
    "users", "products", "categories", "articles", "orders",
    "order_items", "subscribers", "contacts", "settings",
)


def paginate(items: List[Any], offset: Optional[int], limit: Optional[int]) -> List[Any]:
    """Apply offset then limit. A missing or zero limit means 'everything remaining'."""
    start = offset or 0
    if not limit:
        return items[start:]
    return items[start:start + limit]


class MemoryStorage(StorageInterface):
    """Dict-backed storage for development and tests."""

    name = "memory"

    def __init__(self, seed: bool = False):
        """
        Initialize empty tables.

        Args:
            seed: Load the demonstration catalog (categories, products, articles)
        """
        self._tables: Dict[str, Dict[int, BaseModel]] = {kind: {} for kind in ENTITY_KINDS}
        self._next_ids: Dict[str, int] = {kind: 1 for kind in ENTITY_KINDS}
        if seed:
            self._seed()

    def _seed(self) -> None:
        for category in SEED_CATEGORIES:
            self._insert("categories", Category, category.model_dump())
        for product in SEED_PRODUCTS:
            self._insert("products", Product, {**product.model_dump(), "created_at": self._now()})
        for article in SEED_ARTICLES:
            self._insert("articles", Article, {**article.model_dump(), "created_at": self._now()})
        logger.info(
            f"Seeded memory storage with {len(SEED_CATEGORIES)} categories, "
            f"{len(SEED_PRODUCTS)} products and {len(SEED_ARTICLES)} articles"
        )

    @staticmethod
    def _now() -> datetime:
        return datetime.now(UTC)

    # Table helpers. None of these await, so a mutation runs to completion
    # before any other coroutine gets the event loop.

    def _insert(self, kind: str, entity_cls: Type[EntityT], fields: Dict[str, Any]) -> EntityT:
        entity_id = self._next_ids[kind]
        self._next_ids[kind] += 1
        entity = entity_cls.model_validate({**fields, "id": entity_id})
        self._tables[kind][entity_id] = entity
        return entity.model_copy(deep=True)

    def _get(self, kind: str, entity_id: int) -> Optional[BaseModel]:
        entity = self._tables[kind].get(entity_id)
        return entity.model_copy(deep=True) if entity is not None else None

    def _scan(self, kind: str, predicate: Optional[Callable[[Any], bool]] = None) -> List[Any]:
        return [
            entity.model_copy(deep=True)
            for entity in self._tables[kind].values()
            if predicate is None or predicate(entity)
        ]

    def _first(self, kind: str, predicate: Callable[[Any], bool]) -> Optional[BaseModel]:
        for entity in self._tables[kind].values():
            if predicate(entity):
                return entity.model_copy(deep=True)
        return None

    def _replace(self, kind: str, entity_id: int, changes: Dict[str, Any]) -> Optional[BaseModel]:
        existing = self._tables[kind].get(entity_id)
        if existing is None:
            return None
        updated = type(existing).model_validate({**existing.model_dump(), **changes, "id": entity_id})
        self._tables[kind][entity_id] = updated
        return updated.model_copy(deep=True)

    def _remove(self, kind: str, entity_id: int) -> bool:
        return self._tables[kind].pop(entity_id, None) is not None

    # Users
    async def get_user(self, user_id: int) -> Optional[User]:
        return self._get("users", user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return self._first("users", lambda user: user.username == username)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        return self._first("users", lambda user: user.email == email)

    async def create_user(self, user: UserCreate) -> User:
        return self._insert("users", User, {**user.model_dump(), "created_at": self._now()})

    # Products
    async def get_product(self, product_id: int) -> Optional[Product]:
        return self._get("products", product_id)

    async def get_products(self, options: Optional[ProductQuery] = None) -> List[Product]:
        options = options or ProductQuery()

        def matches(product: Product) -> bool:
            if options.category and product.category != options.category:
                return False
            if options.featured is not None and product.is_featured != options.featured:
                return False
            return True

        return paginate(self._scan("products", matches), options.offset, options.limit)

    async def create_product(self, product: ProductCreate) -> Product:
        return self._insert("products", Product, {**product.model_dump(), "created_at": self._now()})

    async def update_product(self, product_id: int, product: ProductUpdate) -> Optional[Product]:
        return self._replace("products", product_id, product.model_dump(exclude_unset=True))

    async def delete_product(self, product_id: int) -> bool:
        return self._remove("products", product_id)

    # Categories
    async def get_categories(self) -> List[Category]:
        return self._scan("categories")

    async def get_category_by_slug(self, slug: str) -> Optional[Category]:
        return self._first("categories", lambda category: category.slug == slug)

    async def create_category(self, category: CategoryCreate) -> Category:
        return self._insert("categories", Category, category.model_dump())

    # Articles
    async def get_article(self, article_id: int) -> Optional[Article]:
        return self._get("articles", article_id)

    async def get_article_by_slug(self, slug: str) -> Optional[Article]:
        return self._first("articles", lambda article: article.slug == slug)

    async def get_articles(self, options: Optional[ArticleQuery] = None) -> List[Article]:
        options = options or ArticleQuery()
        predicate = None
        if options.category:
            predicate = lambda article: article.category == options.category
        return paginate(self._scan("articles", predicate), options.offset, options.limit)

    async def create_article(self, article: ArticleCreate) -> Article:
        return self._insert("articles", Article, {**article.model_dump(), "created_at": self._now()})

    async def update_article(self, article_id: int, article: ArticleUpdate) -> Optional[Article]:
        return self._replace("articles", article_id, article.model_dump(exclude_unset=True))

    async def delete_article(self, article_id: int) -> bool:
        return self._remove("articles", article_id)

    # Orders
    async def get_order(self, order_id: int) -> Optional[Order]:
        return self._get("orders", order_id)

    async def get_user_orders(self, user_id: int) -> List[Order]:
        return self._scan("orders", lambda order: order.user_id == user_id)

    async def create_order(self, order: OrderCreate) -> Order:
        return self._insert("orders", Order, {**order.model_dump(), "created_at": self._now()})

    async def create_order_with_items(self, order: OrderCreate, lines: List[OrderLine]) -> Order:
        # Build every item before touching the tables so a bad line leaves nothing behind.
        pending = [OrderLine.model_validate(line.model_dump()) for line in lines]
        created = self._insert("orders", Order, {**order.model_dump(), "created_at": self._now()})
        for line in pending:
            self._insert("order_items", OrderItem, {**line.model_dump(), "order_id": created.id})
        return created

    async def update_order_status(self, order_id: int, status: str) -> Optional[Order]:
        return self._replace("orders", order_id, {"status": status})

    # Order items
    async def get_order_items(self, order_id: int) -> List[OrderItem]:
        return self._scan("order_items", lambda item: item.order_id == order_id)

    async def create_order_item(self, item: OrderItemCreate) -> OrderItem:
        return self._insert("order_items", OrderItem, item.model_dump())

    # Subscribers
    async def get_subscribers(self) -> List[Subscriber]:
        return self._scan("subscribers")

    async def get_subscriber_by_email(self, email: str) -> Optional[Subscriber]:
        return self._first("subscribers", lambda subscriber: subscriber.email == email)

    async def create_subscriber(self, subscriber: SubscriberCreate) -> Subscriber:
        return self._insert("subscribers", Subscriber, {**subscriber.model_dump(), "created_at": self._now()})

    # Contacts
    async def get_contacts(self) -> List[Contact]:
        return self._scan("contacts")

    async def create_contact(self, contact: ContactCreate) -> Contact:
        return self._insert("contacts", Contact, {**contact.model_dump(), "created_at": self._now()})

    # Settings
    async def get_settings(self, category: Optional[str] = None) -> List[Setting]:
        predicate = None
        if category:
            predicate = lambda setting: setting.category == category
        return sorted(self._scan("settings", predicate), key=lambda setting: setting.key)

    async def get_setting_by_key(self, key: str) -> Optional[Setting]:
        return self._first("settings", lambda setting: setting.key == key)

    async def create_setting(self, setting: SettingCreate) -> Setting:
        now = self._now()
        return self._insert("settings", Setting, {**setting.model_dump(), "created_at": now, "updated_at": now})

    async def update_setting(self, setting_id: int, setting: SettingUpdate) -> Optional[Setting]:
        changes = setting.model_dump(exclude_unset=True)
        changes["updated_at"] = self._now()
        return self._replace("settings", setting_id, changes)

    async def delete_setting(self, setting_id: int) -> bool:
        return self._remove("settings", setting_id)
