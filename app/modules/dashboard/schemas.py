"""
Dashboard DTOs (Data Transfer Objects)
"""

from pydantic import BaseModel, Field
from typing import List


class LowStockProductResponse(BaseModel):
    """Product at or below the low-stock threshold"""

    name: str
    stock: int

    class Config:
        from_attributes = True


class WholesalerOverviewResponse(BaseModel):
    """Wholesaler dashboard overview"""

    totalOrders: int = Field(0, description="Number of orders received")
    pendingOrders: int = Field(0, description="Orders still in pending status")
    totalRevenue: float = Field(0, description="Sum of delivered and shipped order totals")
    totalCustomers: int = Field(0, description="Distinct retailers that placed orders")
    lowStockProducts: List[LowStockProductResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True
