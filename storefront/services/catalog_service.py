"""
Catalog service - business logic for products and categories.
This layer contains no HTTP framework dependencies.
"""
import logging
from typing import List, Optional

from storefront.exceptions import ConflictError
from storefront.models import (
    Category,
    CategoryCreate,
    Product,
    ProductCreate,
    ProductQuery,
    ProductUpdate,
)
from storefront.storage import StorageInterface

logger = logging.getLogger(__name__)


class CatalogService:
    """Service for product and category operations."""

    def __init__(self, storage: StorageInterface):
        """Initialize catalog service with storage dependency."""
        self.storage = storage

    async def list_products(self, query: Optional[ProductQuery] = None) -> List[Product]:
        return await self.storage.get_products(query)

    async def get_product(self, product_id: int) -> Optional[Product]:
        return await self.storage.get_product(product_id)

    async def create_product(self, product_data: ProductCreate) -> Product:
        """
        Create a product.

        Products reference their category by slug. An unknown slug is logged
        but accepted, so products can be loaded before their category.
        """
        if await self.storage.get_category_by_slug(product_data.category) is None:
            logger.warning(f"Creating product '{product_data.name}' in unknown category '{product_data.category}'")
        product = await self.storage.create_product(product_data)
        logger.info(f"Created product {product.id}: {product.name}")
        return product

    async def update_product(self, product_id: int, changes: ProductUpdate) -> Optional[Product]:
        """
        Apply a partial update to a product.

        The merged product must satisfy the same rules as a new one, so a
        limited_count cannot be left on a product that is not limited.

        Returns:
            Updated product, or None if the product does not exist

        Raises:
            pydantic.ValidationError: If the merged product is invalid
        """
        existing = await self.storage.get_product(product_id)
        if existing is None:
            return None
        merged = {**existing.model_dump(exclude={"id", "created_at"}), **changes.model_dump(exclude_unset=True)}
        ProductCreate.model_validate(merged)

        product = await self.storage.update_product(product_id, changes)
        if product is not None:
            logger.info(f"Updated product {product_id}: {sorted(changes.model_fields_set)}")
        return product

    async def delete_product(self, product_id: int) -> bool:
        deleted = await self.storage.delete_product(product_id)
        if deleted:
            logger.info(f"Deleted product {product_id}")
        return deleted

    async def list_categories(self) -> List[Category]:
        return await self.storage.get_categories()

    async def create_category(self, category_data: CategoryCreate) -> Category:
        """
        Create a category.

        Raises:
            ConflictError: If a category with the same slug exists
        """
        if await self.storage.get_category_by_slug(category_data.slug):
            raise ConflictError(f"Category with slug '{category_data.slug}' already exists")
        category = await self.storage.create_category(category_data)
        logger.info(f"Created category {category.id}: {category.slug}")
        return category
