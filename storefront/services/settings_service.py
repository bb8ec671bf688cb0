"""
Settings service - key/value configuration managed from the admin panel.

Keys are namespaced with dots ("site.logoUrl", "payment.upiId"). In batch
updates the category is the part of the key before the first dot.
"""
import json
import logging
from typing import Dict, List, Optional, Tuple

from storefront.models import Setting, SettingCreate, SettingUpdate
from storefront.models.setting_models import DEFAULT_SETTING_CATEGORY
from storefront.storage import StorageInterface

logger = logging.getLogger(__name__)

SITE_CATEGORY = "site"
PAYMENT_CATEGORY = "payment"


def category_for_key(key: str) -> str:
    """Part of the key before the first dot; an undotted key is its own category."""
    return key.split(".", 1)[0] or DEFAULT_SETTING_CATEGORY


def value_to_text(value) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


class SettingsService:
    """Service for settings operations."""

    def __init__(self, storage: StorageInterface):
        self.storage = storage

    async def list_settings(self, category: Optional[str] = None) -> List[Setting]:
        return await self.storage.get_settings(category)

    async def get_setting(self, key: str) -> Optional[Setting]:
        return await self.storage.get_setting_by_key(key)

    async def upsert_setting(self, setting_data: SettingCreate) -> Tuple[Setting, bool]:
        """
        Create the setting, or update the existing one with the same key.

        Returns:
            Tuple of (setting, created)
        """
        existing = await self.storage.get_setting_by_key(setting_data.key)
        if existing is None:
            setting = await self.storage.create_setting(setting_data)
            logger.info(f"Created setting '{setting.key}'")
            return setting, True

        fields = setting_data.model_dump(include={"category", "description"}, exclude_unset=True)
        changes = SettingUpdate(value=setting_data.value, **fields)
        setting = await self.storage.update_setting(existing.id, changes)
        if setting is None:
            # Removed between the lookup and the update.
            setting = await self.storage.create_setting(setting_data)
            return setting, True
        logger.info(f"Updated setting '{setting.key}'")
        return setting, False

    async def upsert_many(self, values: Dict[str, object]) -> List[Setting]:
        """
        Upsert a batch of key/value pairs.

        Args:
            values: Mapping of full key to value
        """
        saved = []
        for key, value in values.items():
            setting_data = SettingCreate(
                key=key,
                value=value_to_text(value),
                category=category_for_key(key),
                description=f"Setting for {key}",
            )
            setting, _ = await self.upsert_setting(setting_data)
            saved.append(setting)
        return saved

    async def delete_setting(self, key: str) -> bool:
        setting = await self.storage.get_setting_by_key(key)
        if setting is None:
            return False
        deleted = await self.storage.delete_setting(setting.id)
        if deleted:
            logger.info(f"Deleted setting '{key}'")
        return deleted

    async def get_values(self, category: str, strip_prefix: bool = False) -> Dict[str, Optional[str]]:
        """
        Settings of one category as a key to value map.

        Args:
            category: Category to read
            strip_prefix: Drop the "<category>." namespace from each key
        """
        prefix = f"{category}."
        values = {}
        for setting in await self.storage.get_settings(category):
            key = setting.key
            if strip_prefix and key.startswith(prefix):
                key = key[len(prefix):]
            values[key] = setting.value
        return values

    async def get_site_settings(self, strip_prefix: bool = False) -> Dict[str, Optional[str]]:
        return await self.get_values(SITE_CATEGORY, strip_prefix=strip_prefix)

    async def get_payment_settings(self) -> Dict[str, Optional[str]]:
        """Payment settings keyed by their full "payment.<name>" key."""
        return await self.get_values(PAYMENT_CATEGORY)

    async def save_payment_settings(self, values: Dict[str, object]) -> List[Setting]:
        """
        Store payment options under the payment namespace.

        Args:
            values: Mapping of option name (without the "payment." prefix) to value

        Returns:
            The saved settings
        """
        saved = []
        for name, value in values.items():
            setting_data = SettingCreate(
                key=f"{PAYMENT_CATEGORY}.{name}",
                value=value_to_text(value),
                category=PAYMENT_CATEGORY,
                description=f"Payment setting for {name}",
            )
            setting, _ = await self.upsert_setting(setting_data)
            saved.append(setting)
        return saved
