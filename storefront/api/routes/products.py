"""
Product and category API routes.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response

from storefront.dependencies import get_catalog_service
from storefront.models import Category, CategoryCreate, Product, ProductCreate, ProductQuery, ProductUpdate
from storefront.services import CatalogService

router = APIRouter(tags=["catalog"])


@router.get("/products", response_model=List[Product])
async def list_products(
    limit: Optional[int] = Query(None, ge=0),
    offset: Optional[int] = Query(None, ge=0),
    category: Optional[str] = Query(None),
    featured: Optional[bool] = Query(None),
    catalog: CatalogService = Depends(get_catalog_service),
) -> List[Product]:
    """List products, newest first."""
    query = ProductQuery(limit=limit, offset=offset, category=category, featured=featured)
    return await catalog.list_products(query)


@router.get("/products/{product_id}", response_model=Product)
async def get_product(
    product_id: int = Path(..., gt=0),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Product:
    product = await catalog.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail=f"Product {product_id} not found")
    return product


@router.post("/products", response_model=Product, status_code=201)
async def create_product(
    product: ProductCreate,
    catalog: CatalogService = Depends(get_catalog_service),
) -> Product:
    return await catalog.create_product(product)


@router.patch("/products/{product_id}", response_model=Product)
async def update_product(
    changes: ProductUpdate,
    product_id: int = Path(..., gt=0),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Product:
    product = await catalog.update_product(product_id, changes)
    if not product:
        raise HTTPException(status_code=404, detail=f"Product {product_id} not found")
    return product


@router.delete("/products/{product_id}", status_code=204)
async def delete_product(
    product_id: int = Path(..., gt=0),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Response:
    if not await catalog.delete_product(product_id):
        raise HTTPException(status_code=404, detail=f"Product {product_id} not found")
    return Response(status_code=204)


@router.get("/categories", response_model=List[Category])
async def list_categories(catalog: CatalogService = Depends(get_catalog_service)) -> List[Category]:
    return await catalog.list_categories()


@router.post("/categories", response_model=Category, status_code=201)
async def create_category(
    category: CategoryCreate,
    catalog: CatalogService = Depends(get_catalog_service),
) -> Category:
    """Create a category. Slugs are unique; a duplicate returns 409."""
    return await catalog.create_category(category)
