"""
Unit tests for InboxService and ArticleService.
"""
import pytest

from storefront.exceptions import ConflictError
from storefront.models import ArticleCreate, ArticleUpdate, ContactCreate, SubscriberCreate
from storefront.services import ArticleService, InboxService
from storefront.storage import MemoryStorage


@pytest.fixture
def storage():
    return MemoryStorage()


class TestInboxService:
    """Tests for subscriptions and contact messages."""

    @pytest.mark.asyncio
    async def test_subscribe_is_idempotent(self, storage):
        inbox = InboxService(storage)

        first, created = await inbox.subscribe(SubscriberCreate(email="news@kharidify.in"))
        second, created_again = await inbox.subscribe(SubscriberCreate(email="news@kharidify.in"))

        assert created is True
        assert created_again is False
        assert second.id == first.id
        assert len(await inbox.list_subscribers()) == 1

    @pytest.mark.asyncio
    async def test_contact_messages(self, storage):
        inbox = InboxService(storage)

        contact = await inbox.submit_contact(
            ContactCreate(name="Meera", email="meera@kharidify.in", message="Hello")
        )

        assert [c.id for c in await inbox.list_contacts()] == [contact.id]


class TestArticleService:
    """Tests for article slug handling."""

    @pytest.mark.asyncio
    async def test_duplicate_slug_is_rejected(self, storage):
        articles = ArticleService(storage)
        await articles.create_article(ArticleCreate(title="Summer Edit", content="..."))

        with pytest.raises(ConflictError):
            await articles.create_article(ArticleCreate(title="Summer Edit", content="again"))

    @pytest.mark.asyncio
    async def test_update_to_another_articles_slug_is_rejected(self, storage):
        articles = ArticleService(storage)
        await articles.create_article(ArticleCreate(title="Summer Edit", content="..."))
        winter = await articles.create_article(ArticleCreate(title="Winter Edit", content="..."))

        with pytest.raises(ConflictError):
            await articles.update_article(winter.id, ArticleUpdate(slug="summer-edit"))

    @pytest.mark.asyncio
    async def test_update_keeping_own_slug(self, storage):
        articles = ArticleService(storage)
        article = await articles.create_article(ArticleCreate(title="Summer Edit", content="..."))

        updated = await articles.update_article(article.id, ArticleUpdate(slug="summer-edit", content="new"))

        assert updated.content == "new"
