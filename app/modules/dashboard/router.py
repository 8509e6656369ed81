"""
Dashboard Router - wholesaler overview endpoint.
"""

from fastapi import APIRouter, Depends

from app.modules.users.auth import TokenData, require_wholesaler
from .service import DashboardService
from .schemas import WholesalerOverviewResponse

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/overview", response_model=WholesalerOverviewResponse)
async def get_overview(current_user: TokenData = Depends(require_wholesaler)):
    """
    Get the calling wholesaler's overview in a single API call.

    Returns:
        - totalOrders: all orders received
        - pendingOrders: orders still pending
        - totalRevenue: delivered + shipped order totals
        - totalCustomers: distinct retailers
        - lowStockProducts: name and stock of products at or below 15 units
    """
    return await DashboardService.get_wholesaler_overview(current_user.user_id)
