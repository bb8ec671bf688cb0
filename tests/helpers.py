"""
Payload builders shared by the storage tests.
"""
from storefront.models import CategoryCreate, ProductCreate, UserCreate


def make_product(name="Coral Bikini", category="swimwear", price=89.0, **fields):
    return ProductCreate(name=name, description=f"{name} description", price=price, category=category, **fields)


def make_user(username="asha", email="asha@kharidify.in", password="s3cret", **fields):
    return UserCreate(username=username, email=email, password=password, **fields)


def make_category(name="Swimwear", slug="swimwear"):
    return CategoryCreate(name=name, slug=slug)
