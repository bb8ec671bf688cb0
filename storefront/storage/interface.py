"""
Storage interface - defines the contract for all storage backends.

Every operation is a coroutine. Lookups return None when the record does not
exist; deletes return whether a record was removed. Backends never swallow
failures: anything other than "not found" propagates to the caller.
"""
from abc import ABC, abstractmethod
from typing import Optional, List

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


class StorageInterface(ABC):
    """Abstract interface for storage operations."""

    name: str = "abstract"

    # User operations
    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[User]:
        """Get a user by ID."""

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]:
        """Get the first user with this username."""

    @abstractmethod
    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Get the first user with this email."""

    @abstractmethod
    async def create_user(self, user: UserCreate) -> User:
        """Create a user. The password is stored exactly as given."""

    # Product operations
    @abstractmethod
    async def get_product(self, product_id: int) -> Optional[Product]:
        """Get a product by ID."""

    @abstractmethod
    async def get_products(self, options: Optional[ProductQuery] = None) -> List[Product]:
        """List products, filtered by category/featured and paged by offset/limit."""

    @abstractmethod
    async def create_product(self, product: ProductCreate) -> Product:
        """Create a product."""

    @abstractmethod
    async def update_product(self, product_id: int, product: ProductUpdate) -> Optional[Product]:
        """Merge the fields set on the payload into a product."""

    @abstractmethod
    async def delete_product(self, product_id: int) -> bool:
        """Delete a product. Returns False if it did not exist."""

    # Category operations
    @abstractmethod
    async def get_categories(self) -> List[Category]:
        """List all categories."""

    @abstractmethod
    async def get_category_by_slug(self, slug: str) -> Optional[Category]:
        """Get the first category with this slug."""

    @abstractmethod
    async def create_category(self, category: CategoryCreate) -> Category:
        """Create a category."""

    # Article operations
    @abstractmethod
    async def get_article(self, article_id: int) -> Optional[Article]:
        """Get an article by ID."""

    @abstractmethod
    async def get_article_by_slug(self, slug: str) -> Optional[Article]:
        """Get the first article with this slug."""

    @abstractmethod
    async def get_articles(self, options: Optional[ArticleQuery] = None) -> List[Article]:
        """List articles, filtered by category and paged by offset/limit."""

    @abstractmethod
    async def create_article(self, article: ArticleCreate) -> Article:
        """Create an article."""

    @abstractmethod
    async def update_article(self, article_id: int, article: ArticleUpdate) -> Optional[Article]:
        """Merge the fields set on the payload into an article."""

    @abstractmethod
    async def delete_article(self, article_id: int) -> bool:
        """Delete an article. Returns False if it did not exist."""

    # Order operations
    @abstractmethod
    async def get_order(self, order_id: int) -> Optional[Order]:
        """Get an order by ID."""

    @abstractmethod
    async def get_user_orders(self, user_id: int) -> List[Order]:
        """List the orders placed by a user."""

    @abstractmethod
    async def create_order(self, order: OrderCreate) -> Order:
        """Create an order without items."""

    @abstractmethod
    async def create_order_with_items(self, order: OrderCreate, lines: List[OrderLine]) -> Order:
        """Create an order and all of its items, or nothing at all."""

    @abstractmethod
    async def update_order_status(self, order_id: int, status: str) -> Optional[Order]:
        """Set an order's status."""

    # Order item operations
    @abstractmethod
    async def get_order_items(self, order_id: int) -> List[OrderItem]:
        """List the items of an order."""

    @abstractmethod
    async def create_order_item(self, item: OrderItemCreate) -> OrderItem:
        """Add an item to an existing order."""

    # Subscriber operations
    @abstractmethod
    async def get_subscribers(self) -> List[Subscriber]:
        """List newsletter subscribers."""

    @abstractmethod
    async def get_subscriber_by_email(self, email: str) -> Optional[Subscriber]:
        """Get the first subscriber with this email."""

    @abstractmethod
    async def create_subscriber(self, subscriber: SubscriberCreate) -> Subscriber:
        """Create a subscriber."""

    # Contact operations
    @abstractmethod
    async def get_contacts(self) -> List[Contact]:
        """List contact-form messages."""

    @abstractmethod
    async def create_contact(self, contact: ContactCreate) -> Contact:
        """Store a contact-form message."""

    # Setting operations
    @abstractmethod
    async def get_settings(self, category: Optional[str] = None) -> List[Setting]:
        """List settings, optionally for one category, sorted by key."""

    @abstractmethod
    async def get_setting_by_key(self, key: str) -> Optional[Setting]:
        """Get the first setting with this key."""

    @abstractmethod
    async def create_setting(self, setting: SettingCreate) -> Setting:
        """Create a setting."""

    @abstractmethod
    async def update_setting(self, setting_id: int, setting: SettingUpdate) -> Optional[Setting]:
        """Merge the fields set on the payload into a setting and refresh updated_at."""

    @abstractmethod
    async def delete_setting(self, setting_id: int) -> bool:
        """Delete a setting. Returns False if it did not exist."""

    async def ping(self) -> None:
        """Check that the backend can serve requests. Raises on failure."""

    async def close(self) -> None:
        """Release backend resources."""
