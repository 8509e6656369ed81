"""Wholesaler dashboard module"""

from .service import DashboardService
from .router import router

__all__ = ["DashboardService", "router"]
