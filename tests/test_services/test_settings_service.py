"""
Unit tests for SettingsService, backed by the in-memory storage.
"""
import pytest

from storefront.models import SettingCreate
from storefront.services import SettingsService
from storefront.services.settings_service import category_for_key, value_to_text
from storefront.storage import MemoryStorage


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def settings_service(storage):
    return SettingsService(storage)


def test_category_for_key():
    assert category_for_key("site.logoUrl") == "site"
    assert category_for_key("payment.bank.ifsc") == "payment"
    assert category_for_key("maintenance") == "maintenance"
    assert category_for_key(".hidden") == "general"


def test_value_to_text():
    assert value_to_text(None) is None
    assert value_to_text("abc") == "abc"
    assert value_to_text(True) == "true"
    assert value_to_text(12) == "12"


def test_value_to_text_serializes_json_values():
    assert value_to_text({"a": 1}) == '{"a": 1}'
    assert value_to_text(["xs", "m"]) == '["xs", "m"]'


@pytest.mark.asyncio
async def test_upsert_creates_then_updates(settings_service, storage):
    created, was_created = await settings_service.upsert_setting(
        SettingCreate(key="site.name", value="Kharidify", category="site")
    )
    updated, was_created_again = await settings_service.upsert_setting(
        SettingCreate(key="site.name", value="Kharidify Store")
    )

    assert was_created is True
    assert was_created_again is False
    assert updated.id == created.id
    assert updated.value == "Kharidify Store"
    # Category was not sent on the second call, so it is left alone.
    assert updated.category == "site"
    assert len(await storage.get_settings()) == 1


@pytest.mark.asyncio
async def test_upsert_many_derives_category_from_key(settings_service, storage):
    await settings_service.upsert_many({"site.name": "Kharidify", "site.logoUrl": "/logo.png", "maintenance": False})

    site = await storage.get_settings("site")
    maintenance = await storage.get_settings("maintenance")

    assert [s.key for s in site] == ["site.logoUrl", "site.name"]
    assert [(s.key, s.value) for s in maintenance] == [("maintenance", "false")]
    assert await storage.get_settings("general") == []
    assert site[0].description == "Setting for site.logoUrl"


@pytest.mark.asyncio
async def test_site_settings_map(settings_service):
    await settings_service.upsert_many({"site.name": "Kharidify", "site.tagline": "Slow fashion"})

    assert await settings_service.get_site_settings() == {"site.name": "Kharidify", "site.tagline": "Slow fashion"}
    assert await settings_service.get_site_settings(strip_prefix=True) == {"name": "Kharidify", "tagline": "Slow fashion"}


@pytest.mark.asyncio
async def test_payment_settings(settings_service, storage):
    result = await settings_service.save_payment_settings({"upiId": "shop@upi", "codEnabled": True})

    assert [(s.key, s.value) for s in result] == [("payment.upiId", "shop@upi"), ("payment.codEnabled", "true")]
    stored = await storage.get_setting_by_key("payment.upiId")
    assert stored.category == "payment"
    assert stored.description == "Payment setting for upiId"
    assert await settings_service.get_payment_settings() == {"payment.codEnabled": "true", "payment.upiId": "shop@upi"}


@pytest.mark.asyncio
async def test_delete_setting_by_key(settings_service):
    await settings_service.upsert_setting(SettingCreate(key="site.name", value="Kharidify"))

    assert await settings_service.delete_setting("site.name") is True
    assert await settings_service.get_setting("site.name") is None
    assert await settings_service.delete_setting("site.name") is False
