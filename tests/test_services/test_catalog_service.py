"""
Unit tests for CatalogService.
Tests business logic in isolation without HTTP framework dependencies.
"""
from datetime import datetime
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from storefront.exceptions import ConflictError
from storefront.models import Category, CategoryCreate, Product, ProductCreate, ProductQuery, ProductUpdate
from storefront.services import CatalogService
from storefront.storage import StorageInterface


@pytest.fixture
def mock_storage():
    """Create a mock storage backend."""
    return MagicMock(spec=StorageInterface)


@pytest.fixture
def catalog_service(mock_storage):
    return CatalogService(mock_storage)


def product(**fields):
    data = {"id": 1, "name": "Coral Bikini", "description": "...", "price": 89.0, "category": "swimwear",
            "created_at": datetime(2026, 1, 1)}
    data.update(fields)
    return Product(**data)


class TestProducts:
    """Tests for product methods."""

    @pytest.mark.asyncio
    async def test_list_products_passes_query(self, catalog_service, mock_storage):
        query = ProductQuery(category="swimwear", limit=5)
        mock_storage.get_products.return_value = [product()]

        result = await catalog_service.list_products(query)

        assert [p.id for p in result] == [1]
        mock_storage.get_products.assert_awaited_once_with(query)

    @pytest.mark.asyncio
    async def test_create_product_in_known_category(self, catalog_service, mock_storage):
        payload = ProductCreate(name="Coral Bikini", description="...", price=89.0, category="swimwear")
        mock_storage.get_category_by_slug.return_value = Category(id=1, name="Swimwear", slug="swimwear")
        mock_storage.create_product.return_value = product()

        result = await catalog_service.create_product(payload)

        assert result.id == 1
        mock_storage.create_product.assert_awaited_once_with(payload)

    @pytest.mark.asyncio
    async def test_create_product_in_unknown_category_is_allowed(self, catalog_service, mock_storage):
        payload = ProductCreate(name="Coral Bikini", description="...", price=89.0, category="new-in")
        mock_storage.get_category_by_slug.return_value = None
        mock_storage.create_product.return_value = product(category="new-in")

        result = await catalog_service.create_product(payload)

        assert result.category == "new-in"

    @pytest.mark.asyncio
    async def test_update_product(self, catalog_service, mock_storage):
        changes = ProductUpdate(price=69.0)
        mock_storage.get_product.return_value = product()
        mock_storage.update_product.return_value = product(price=69.0)

        result = await catalog_service.update_product(1, changes)

        assert result.price == 69.0
        mock_storage.update_product.assert_awaited_once_with(1, changes)

    @pytest.mark.asyncio
    async def test_update_missing_product(self, catalog_service, mock_storage):
        mock_storage.get_product.return_value = None

        assert await catalog_service.update_product(5, ProductUpdate(price=1.0)) is None
        mock_storage.update_product.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_validates_merged_product(self, catalog_service, mock_storage):
        mock_storage.get_product.return_value = product(is_limited=False)

        with pytest.raises(ValidationError, match="limited_count"):
            await catalog_service.update_product(1, ProductUpdate(limited_count=5))
        mock_storage.update_product.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_limited_count_with_limited_flag(self, catalog_service, mock_storage):
        mock_storage.get_product.return_value = product(is_limited=False)
        mock_storage.update_product.return_value = product(is_limited=True, limited_count=5)

        result = await catalog_service.update_product(1, ProductUpdate(is_limited=True, limited_count=5))

        assert result.limited_count == 5

    @pytest.mark.asyncio
    async def test_delete_product(self, catalog_service, mock_storage):
        mock_storage.delete_product.return_value = True

        assert await catalog_service.delete_product(1) is True
        mock_storage.delete_product.assert_awaited_once_with(1)


class TestCategories:
    """Tests for category methods."""

    @pytest.mark.asyncio
    async def test_create_category(self, catalog_service, mock_storage):
        payload = CategoryCreate(name="Swimwear", slug="swimwear")
        mock_storage.get_category_by_slug.return_value = None
        mock_storage.create_category.return_value = Category(id=3, name="Swimwear", slug="swimwear")

        result = await catalog_service.create_category(payload)

        assert result.id == 3

    @pytest.mark.asyncio
    async def test_create_category_duplicate_slug(self, catalog_service, mock_storage):
        mock_storage.get_category_by_slug.return_value = Category(id=1, name="Swimwear", slug="swimwear")

        with pytest.raises(ConflictError, match="swimwear"):
            await catalog_service.create_category(CategoryCreate(name="Swim", slug="swimwear"))
        mock_storage.create_category.assert_not_called()
