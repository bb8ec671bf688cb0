"""
Order API routes.
"""
from fastapi import APIRouter, Depends, HTTPException, Path

from storefront.dependencies import get_order_service
from storefront.models import Order, OrderRequest, OrderStatusUpdate, OrderWithItems
from storefront.services import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderWithItems, status_code=201)
async def place_order(
    order: OrderRequest,
    orders: OrderService = Depends(get_order_service),
) -> OrderWithItems:
    """Place an order with its items in one request."""
    return await orders.place_order(order)


@router.get("/{order_id}", response_model=OrderWithItems)
async def get_order(
    order_id: int = Path(..., gt=0),
    orders: OrderService = Depends(get_order_service),
) -> OrderWithItems:
    order = await orders.get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")
    return order


@router.patch("/{order_id}/status", response_model=Order)
async def update_order_status(
    update: OrderStatusUpdate,
    order_id: int = Path(..., gt=0),
    orders: OrderService = Depends(get_order_service),
) -> Order:
    order = await orders.update_status(order_id, update.status)
    if not order:
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")
    return order
