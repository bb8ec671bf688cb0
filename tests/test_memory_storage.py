"""
Tests for behaviour specific to the in-memory backend.
"""
import pytest

from helpers import make_category, make_product, make_user
from storefront.models import OrderCreate, OrderLine, ProductQuery, ProductUpdate, SubscriberCreate
from storefront.storage import MemoryStorage
from storefront.storage.memory_storage import paginate


def test_paginate():
    items = list(range(5))
    assert paginate(items, None, None) == items
    assert paginate(items, 1, 2) == [1, 2]
    assert paginate(items, 3, None) == [3, 4]
    assert paginate(items, 0, 0) == items
    assert paginate(items, 10, 2) == []


@pytest.mark.asyncio
async def test_products_are_listed_in_insertion_order(memory_storage):
    for name in ("First", "Second", "Third"):
        await memory_storage.create_product(make_product(name))

    products = await memory_storage.get_products()

    assert [p.name for p in products] == ["First", "Second", "Third"]


@pytest.mark.asyncio
async def test_duplicates_are_allowed_and_first_match_wins(memory_storage):
    first = await memory_storage.create_user(make_user(username="asha"))
    second = await memory_storage.create_user(make_user(username="asha-2"))

    assert second.id != first.id
    assert (await memory_storage.get_user_by_email("asha@kharidify.in")).id == first.id

    await memory_storage.create_category(make_category("Swim", "swimwear"))
    await memory_storage.create_category(make_category("Swim again", "swimwear"))
    assert (await memory_storage.get_category_by_slug("swimwear")).name == "Swim"

    await memory_storage.create_subscriber(SubscriberCreate(email="news@kharidify.in"))
    await memory_storage.create_subscriber(SubscriberCreate(email="news@kharidify.in"))
    assert len(await memory_storage.get_subscribers()) == 2


@pytest.mark.asyncio
async def test_ids_are_counted_per_entity_kind(memory_storage):
    product = await memory_storage.create_product(make_product())
    category = await memory_storage.create_category(make_category())

    assert product.id == 1
    assert category.id == 1


@pytest.mark.asyncio
async def test_seed_loads_demo_catalog():
    storage = MemoryStorage(seed=True)

    categories = await storage.get_categories()
    products = await storage.get_products()
    articles = await storage.get_articles()

    assert len(categories) == 6
    assert len(products) == 11
    assert len(articles) == 3
    assert {p.category for p in products} <= {c.slug for c in categories}
    featured = await storage.get_products(ProductQuery(featured=True))
    assert featured
    assert all(p.is_featured for p in featured)


@pytest.mark.asyncio
async def test_unseeded_storage_is_empty(memory_storage):
    assert await memory_storage.get_products() == []
    assert await memory_storage.get_categories() == []


@pytest.mark.asyncio
async def test_no_referential_checks(memory_storage):
    """Order items may point at products and users that do not exist."""
    order = await memory_storage.create_order_with_items(
        OrderCreate(user_id=42, total=10.0),
        [OrderLine(product_id=999, quantity=1, price=10.0)],
    )

    items = await memory_storage.get_order_items(order.id)
    assert items[0].product_id == 999


@pytest.mark.asyncio
async def test_update_does_not_touch_previously_returned_copies(memory_storage):
    product = await memory_storage.create_product(make_product(price=50.0))

    updated = await memory_storage.update_product(product.id, ProductUpdate(price=60.0))

    assert updated.price == 60.0
    assert product.price == 50.0
