"""
Pydantic models for editorial articles.
"""
import re
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator


def slugify(title: str) -> str:
    """Turn a title into a URL slug: lowercase, punctuation dropped, spaces to dashes."""
    slug = re.sub(r"[^\w\s]", "", title.lower())
    return re.sub(r"\s+", "-", slug.strip())


class ArticleCreate(BaseModel):
    """Payload for creating an article. The slug defaults to one derived from the title."""
    title: str = Field(..., min_length=1)
    slug: Optional[str] = Field(None, description="URL slug (unique)")
    content: str
    excerpt: Optional[str] = None
    cover_image: Optional[str] = None
    category: Optional[str] = None

    @model_validator(mode='after')
    def fill_slug(self) -> 'ArticleCreate':
        if not self.slug:
            self.slug = slugify(self.title)
        if not self.slug:
            raise ValueError("Could not derive a slug from the title")
        return self


class ArticleUpdate(BaseModel):
    """Partial article update."""
    title: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = None
    excerpt: Optional[str] = None
    cover_image: Optional[str] = None
    category: Optional[str] = None

    @field_validator('title', 'slug', 'content')
    @classmethod
    def validate_not_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class Article(BaseModel):
    """Stored article."""
    id: int
    title: str
    slug: str
    content: str
    excerpt: Optional[str] = None
    cover_image: Optional[str] = None
    category: Optional[str] = None
    created_at: datetime


class ArticleQuery(BaseModel):
    """Filtering and paging options for article listings."""
    limit: Optional[int] = Field(None, ge=0)
    offset: Optional[int] = Field(None, ge=0)
    category: Optional[str] = None
