"""
Article service - business logic for editorial content.
"""
import logging
from typing import List, Optional

from storefront.exceptions import ConflictError
from storefront.models import Article, ArticleCreate, ArticleQuery, ArticleUpdate
from storefront.storage import StorageInterface

logger = logging.getLogger(__name__)


class ArticleService:
    """Service for article operations."""

    def __init__(self, storage: StorageInterface):
        self.storage = storage

    async def list_articles(self, query: Optional[ArticleQuery] = None) -> List[Article]:
        return await self.storage.get_articles(query)

    async def get_article_by_slug(self, slug: str) -> Optional[Article]:
        return await self.storage.get_article_by_slug(slug)

    async def create_article(self, article_data: ArticleCreate) -> Article:
        """
        Create an article.

        Raises:
            ConflictError: If another article already uses the slug
        """
        if await self.storage.get_article_by_slug(article_data.slug):
            raise ConflictError(f"Article with slug '{article_data.slug}' already exists")
        article = await self.storage.create_article(article_data)
        logger.info(f"Created article {article.id}: {article.slug}")
        return article

    async def update_article(self, article_id: int, changes: ArticleUpdate) -> Optional[Article]:
        """
        Apply a partial update to an article.

        Raises:
            ConflictError: If the new slug belongs to a different article
        """
        if changes.slug:
            existing = await self.storage.get_article_by_slug(changes.slug)
            if existing and existing.id != article_id:
                raise ConflictError(f"Article with slug '{changes.slug}' already exists")
        article = await self.storage.update_article(article_id, changes)
        if article is not None:
            logger.info(f"Updated article {article_id}")
        return article

    async def delete_article(self, article_id: int) -> bool:
        deleted = await self.storage.delete_article(article_id)
        if deleted:
            logger.info(f"Deleted article {article_id}")
        return deleted
