"""
Inbox service - newsletter subscriptions and contact-form messages.
"""
import logging
from typing import List, Tuple

from storefront.models import Contact, ContactCreate, Subscriber, SubscriberCreate
from storefront.storage import StorageInterface

logger = logging.getLogger(__name__)


class InboxService:
    """Service for inbound messages from site visitors."""

    def __init__(self, storage: StorageInterface):
        self.storage = storage

    async def subscribe(self, subscriber_data: SubscriberCreate) -> Tuple[Subscriber, bool]:
        """
        Subscribe an email to the newsletter.

        Subscribing twice is not an error; the existing record is returned.

        Returns:
            Tuple of (subscriber, created)
        """
        existing = await self.storage.get_subscriber_by_email(subscriber_data.email)
        if existing is not None:
            return existing, False
        subscriber = await self.storage.create_subscriber(subscriber_data)
        logger.info(f"New subscriber {subscriber.id}")
        return subscriber, True

    async def list_subscribers(self) -> List[Subscriber]:
        return await self.storage.get_subscribers()

    async def submit_contact(self, contact_data: ContactCreate) -> Contact:
        contact = await self.storage.create_contact(contact_data)
        logger.info(f"Stored contact message {contact.id}")
        return contact

    async def list_contacts(self) -> List[Contact]:
        return await self.storage.get_contacts()
