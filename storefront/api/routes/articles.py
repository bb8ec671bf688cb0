"""
Article API routes.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response

from storefront.dependencies import get_article_service
from storefront.models import Article, ArticleCreate, ArticleQuery, ArticleUpdate
from storefront.services import ArticleService

router = APIRouter(prefix="/articles", tags=["articles"])


@router.get("", response_model=List[Article])
async def list_articles(
    limit: Optional[int] = Query(None, ge=0),
    offset: Optional[int] = Query(None, ge=0),
    category: Optional[str] = Query(None),
    articles: ArticleService = Depends(get_article_service),
) -> List[Article]:
    return await articles.list_articles(ArticleQuery(limit=limit, offset=offset, category=category))


@router.get("/{slug}", response_model=Article)
async def get_article(
    slug: str = Path(..., min_length=1),
    articles: ArticleService = Depends(get_article_service),
) -> Article:
    """Get an article by its slug."""
    article = await articles.get_article_by_slug(slug)
    if not article:
        raise HTTPException(status_code=404, detail=f"Article '{slug}' not found")
    return article


@router.post("", response_model=Article, status_code=201)
async def create_article(
    article: ArticleCreate,
    articles: ArticleService = Depends(get_article_service),
) -> Article:
    return await articles.create_article(article)


@router.patch("/{article_id}", response_model=Article)
async def update_article(
    changes: ArticleUpdate,
    article_id: int = Path(..., gt=0),
    articles: ArticleService = Depends(get_article_service),
) -> Article:
    article = await articles.update_article(article_id, changes)
    if not article:
        raise HTTPException(status_code=404, detail=f"Article {article_id} not found")
    return article


@router.delete("/{article_id}", status_code=204)
async def delete_article(
    article_id: int = Path(..., gt=0),
    articles: ArticleService = Depends(get_article_service),
) -> Response:
    if not await articles.delete_article(article_id):
        raise HTTPException(status_code=404, detail=f"Article {article_id} not found")
    return Response(status_code=204)
