"""
Retailer dashboard DTOs (Data Transfer Objects)
"""

from pydantic import BaseModel, Field
from typing import List

from app.modules.orders.schemas import OrderResponse


class RetailerOverviewResponse(BaseModel):
    """Retailer dashboard overview"""

    totalOrders: int = Field(0, description="Number of orders placed")
    totalSpent: float = Field(0, description="Sum of order totals across all statuses")
    pendingPayments: int = Field(0, description="Orders still in pending status")
    recentOrders: List[OrderResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True
