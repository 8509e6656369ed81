"""Products module - read model for low-stock alerts"""

from .models import Product

__all__ = ["Product"]
