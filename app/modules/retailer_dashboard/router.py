"""
Retailer Dashboard Router - retailer overview endpoint.
"""

from fastapi import APIRouter, Depends

from app.modules.users.auth import TokenData, require_retailer
from .service import RetailerDashboardService
from .schemas import RetailerOverviewResponse

router = APIRouter(prefix="/retailerDashboard", tags=["retailer-dashboard"])


@router.get("/overview", response_model=RetailerOverviewResponse)
async def get_overview(current_user: TokenData = Depends(require_retailer)):
    """
    Get the calling retailer's overview.

    Returns:
        - totalOrders / totalSpent: count and sum over all of the retailer's orders
        - pendingPayments: orders still pending
        - recentOrders: the 10 most recent orders, newest first
    """
    return await RetailerDashboardService.get_retailer_overview(current_user.user_id)
