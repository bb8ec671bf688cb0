"""
Order service - placing orders and tracking their status.
"""
import logging
from typing import Optional

from storefront.models import Order, OrderCreate, OrderRequest, OrderWithItems
from storefront.storage import StorageInterface

logger = logging.getLogger(__name__)


class OrderService:
    """Service for order operations."""

    def __init__(self, storage: StorageInterface):
        self.storage = storage

    async def place_order(self, order_request: OrderRequest) -> OrderWithItems:
        """
        Create an order together with its lines.

        The order and its items are written in one step; if any item cannot
        be stored, no order is left behind.
        """
        order_data = OrderCreate.model_validate(order_request.model_dump(exclude={"items"}))
        order = await self.storage.create_order_with_items(order_data, order_request.items)
        items = await self.storage.get_order_items(order.id)
        logger.info(f"Placed order {order.id} with {len(items)} items, total {order.total}")
        return OrderWithItems(**order.model_dump(), items=items)

    async def get_order(self, order_id: int) -> Optional[OrderWithItems]:
        order = await self.storage.get_order(order_id)
        if order is None:
            return None
        items = await self.storage.get_order_items(order_id)
        return OrderWithItems(**order.model_dump(), items=items)

    async def update_status(self, order_id: int, status: str) -> Optional[Order]:
        order = await self.storage.update_order_status(order_id, status)
        if order is not None:
            logger.info(f"Order {order_id} moved to status '{status}'")
        return order
