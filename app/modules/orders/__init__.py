"""Orders module - read model shared by the dashboards"""

from .models import Order, OrderItem, OrderStatus
from .schemas import OrderItemResponse, OrderResponse

__all__ = ["Order", "OrderItem", "OrderStatus", "OrderItemResponse", "OrderResponse"]
