"""
Order DTOs (Data Transfer Objects)
"""

from pydantic import BaseModel
from typing import List
from datetime import datetime

from .models import Order, OrderStatus


class OrderItemResponse(BaseModel):
    """Order line item"""

    product: int
    quantity: int
    price: float

    class Config:
        from_attributes = True


class OrderResponse(BaseModel):
    """Full order record as returned to the owning retailer"""

    id: int
    wholesaler: int
    retailer: int
    items: List[OrderItemResponse]
    total: float
    status: OrderStatus
    createdAt: datetime
    updatedAt: datetime

    class Config:
        from_attributes = True

    @classmethod
    def from_order(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id,
            wholesaler=order.wholesaler_id,
            retailer=order.retailer_id,
            items=[
                OrderItemResponse(
                    product=item.product_id,
                    quantity=item.quantity,
                    price=float(item.price),
                )
                for item in order.items
            ],
            total=float(order.total),
            status=order.status,
            createdAt=order.created_at,
            updatedAt=order.updated_at,
        )
