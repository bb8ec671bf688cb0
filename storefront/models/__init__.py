"""
Pydantic models for storage payloads, stored entities and HTTP requests.
"""
from .user_models import UserCreate, User, UserPublic, LoginRequest
from .product_models import (
    CategoryCreate,
    Category,
    ProductCreate,
    ProductUpdate,
    Product,
    ProductQuery,
)
from .article_models import ArticleCreate, ArticleUpdate, Article, ArticleQuery, slugify
from .order_models import (
    OrderCreate,
    Order,
    OrderLine,
    OrderItemCreate,
    OrderItem,
    OrderRequest,
    OrderStatusUpdate,
    OrderWithItems,
)
from .inbox_models import SubscriberCreate, Subscriber, ContactCreate, Contact
from .setting_models import SettingCreate, SettingUpdate, Setting

__all__ = [
    "UserCreate",
    "User",
    "UserPublic",
    "LoginRequest",
    "CategoryCreate",
    "Category",
    "ProductCreate",
    "ProductUpdate",
    "Product",
    "ProductQuery",
    "ArticleCreate",
    "ArticleUpdate",
    "Article",
    "ArticleQuery",
    "slugify",
    "OrderCreate",
    "Order",
    "OrderLine",
    "OrderItemCreate",
    "OrderItem",
    "OrderRequest",
    "OrderStatusUpdate",
    "OrderWithItems",
    "SubscriberCreate",
    "Subscriber",
    "ContactCreate",
    "Contact",
    "SettingCreate",
    "SettingUpdate",
    "Setting",
]
