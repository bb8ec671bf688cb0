"""
Pydantic models for the product catalog (products and categories).
"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator


class CategoryCreate(BaseModel):
    """Payload for creating a category."""
    name: str = Field(..., description="Display name", min_length=1)
    slug: str = Field(..., description="URL slug (unique); products reference it", min_length=1)

    @field_validator('name', 'slug')
    @classmethod
    def validate_not_empty_or_whitespace(cls, v: str) -> str:
        """Validate that string fields are not empty or only whitespace."""
        if not v or not v.strip():
            raise ValueError("Field cannot be empty or contain only whitespace")
        return v.strip()


class Category(CategoryCreate):
    """Stored category."""
    id: int


class ProductCreate(BaseModel):
    """Payload for creating a product."""
    name: str = Field(..., description="Product name", min_length=1)
    description: str = Field(..., description="Product description")
    price: float = Field(..., description="Unit price", ge=0)
    discount_price: Optional[float] = Field(None, description="Sale price", ge=0)
    images: Optional[List[str]] = Field(None, description="Image URLs")
    category: str = Field(..., description="Category slug", min_length=1)
    in_stock: bool = True
    is_featured: bool = False
    is_limited: bool = False
    limited_count: Optional[int] = Field(None, description="Edition size for limited products", ge=0)
    sustainable_materials: Optional[List[str]] = None
    made_in: Optional[str] = Field(None, description="Country of origin")

    @field_validator('name', 'category')
    @classmethod
    def validate_not_empty_or_whitespace(cls, v: str) -> str:
        """Validate that string fields are not empty or only whitespace."""
        if not v or not v.strip():
            raise ValueError("Field cannot be empty or contain only whitespace")
        return v.strip()

    @model_validator(mode='after')
    def validate_limited_count(self) -> 'ProductCreate':
        """A limited count only makes sense on limited products."""
        if self.limited_count is not None and not self.is_limited:
            raise ValueError("limited_count requires is_limited to be true")
        return self


class ProductUpdate(BaseModel):
    """Partial product update. Only fields that are set get applied."""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    discount_price: Optional[float] = Field(None, ge=0)
    images: Optional[List[str]] = None
    category: Optional[str] = Field(None, min_length=1)
    in_stock: Optional[bool] = None
    is_featured: Optional[bool] = None
    is_limited: Optional[bool] = None
    limited_count: Optional[int] = Field(None, ge=0)
    sustainable_materials: Optional[List[str]] = None
    made_in: Optional[str] = None

    @field_validator('name', 'description', 'price', 'category', 'in_stock', 'is_featured', 'is_limited')
    @classmethod
    def validate_not_null(cls, v):
        """Required columns may be left out of an update but not cleared."""
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    @field_validator('name', 'category')
    @classmethod
    def validate_not_empty_or_whitespace(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        if not v.strip():
            raise ValueError("Field cannot be empty or contain only whitespace")
        return v.strip()

    @model_validator(mode='after')
    def validate_limited_count(self) -> 'ProductUpdate':
        if self.limited_count is not None and self.is_limited is False:
            raise ValueError("limited_count requires is_limited to be true")
        return self


class Product(BaseModel):
    """Stored product."""
    id: int
    name: str
    description: str
    price: float
    discount_price: Optional[float] = None
    images: Optional[List[str]] = None
    category: str
    in_stock: bool = True
    is_featured: bool = False
    is_limited: bool = False
    limited_count: Optional[int] = None
    sustainable_materials: Optional[List[str]] = None
    made_in: Optional[str] = None
    created_at: datetime


class ProductQuery(BaseModel):
    """Filtering and paging options for product listings."""
    limit: Optional[int] = Field(None, ge=0)
    offset: Optional[int] = Field(None, ge=0)
    category: Optional[str] = None
    featured: Optional[bool] = None
