"""
Pydantic models for orders and order items.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

DEFAULT_ORDER_STATUS = "pending"


class OrderCreate(BaseModel):
    """Payload for creating an order."""
    user_id: Optional[int] = Field(None, gt=0)
    status: str = Field(DEFAULT_ORDER_STATUS, min_length=1)
    total: float = Field(..., ge=0)
    shipping_address: Optional[Dict[str, Any]] = None
    billing_address: Optional[Dict[str, Any]] = None
    payment_method: Optional[str] = None
    payment_status: Optional[str] = None


class Order(BaseModel):
    """Stored order."""
    id: int
    user_id: Optional[int] = None
    status: str
    total: float
    shipping_address: Optional[Dict[str, Any]] = None
    billing_address: Optional[Dict[str, Any]] = None
    payment_method: Optional[str] = None
    payment_status: Optional[str] = None
    created_at: datetime


class OrderLine(BaseModel):
    """One line of an order before the order exists."""
    product_id: int = Field(..., gt=0)
    quantity: int = Field(..., gt=0)
    price: float = Field(..., description="Unit price at purchase time", ge=0)


class OrderItemCreate(OrderLine):
    """Payload for creating an order item against an existing order."""
    order_id: int = Field(..., gt=0)


class OrderItem(BaseModel):
    """Stored order item. The price is a snapshot, not a live product reference."""
    id: int
    order_id: int
    product_id: int
    quantity: int
    price: float


class OrderRequest(OrderCreate):
    """HTTP payload for placing an order together with its lines."""
    items: List[OrderLine] = Field(default_factory=list)


class OrderStatusUpdate(BaseModel):
    """HTTP payload for moving an order to another status."""
    status: str = Field(..., min_length=1)

    @field_validator('status')
    @classmethod
    def validate_not_empty_or_whitespace(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Status cannot be empty or contain only whitespace")
        return v.strip()


class OrderWithItems(Order):
    """Order together with its items."""
    items: List[OrderItem] = Field(default_factory=list)
