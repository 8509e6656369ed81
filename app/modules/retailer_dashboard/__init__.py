"""Retailer dashboard module"""

from .service import RetailerDashboardService
from .router import router

__all__ = ["RetailerDashboardService", "router"]
