"""
RetailerDashboardService - aggregates the retailer overview.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from decimal import Decimal
from typing import List
from sqlalchemy import select, func, desc
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.db.engine import run_db
from app.core.exceptions import DatabaseError
from app.modules.dashboard.constants import PENDING_STATUS, RECENT_ORDERS_LIMIT
from app.modules.orders.models import Order
from app.modules.orders.schemas import OrderResponse
from .schemas import RetailerOverviewResponse

logger = logging.getLogger(__name__)


@dataclass
class OrderStats:
    """Count and spend over one retailer's orders, taken from a single grouped query."""
    total_orders: int
    total_spent: Decimal


class RetailerDashboardService:
    """
    Retailer dashboard service.
    Each query runs through run_db() in its own session so the reads can overlap.
    """

    @staticmethod
    async def get_order_stats(db: AsyncSession, retailer_id: int) -> OrderStats:
        """
        Count and total spend in one grouped aggregation, so both figures come from
        the same snapshot. Spend covers every status, pending included.
        A retailer without orders produces no group row; both figures are then 0.
        """
        result = await db.execute(
            select(
                func.count(Order.id).label("total_orders"),
                func.sum(Order.total).label("total_spent"),
            )
            .where(Order.retailer_id == retailer_id)
            .group_by(Order.retailer_id)
        )
        row = result.first()
        if row is None:
            return OrderStats(total_orders=0, total_spent=Decimal("0"))
        return OrderStats(
            total_orders=row.total_orders,
            total_spent=row.total_spent or Decimal("0"),
        )

    @staticmethod
    async def count_pending_orders(db: AsyncSession, retailer_id: int) -> int:
        return await db.scalar(
            select(func.count(Order.id)).where(
                Order.retailer_id == retailer_id,
                Order.status == PENDING_STATUS,
            )
        ) or 0

    @staticmethod
    async def find_recent_orders(db: AsyncSession, retailer_id: int) -> List[OrderResponse]:
        result = await db.execute(
            select(Order)
            .where(Order.retailer_id == retailer_id)
            .options(selectinload(Order.items))
            .order_by(desc(Order.created_at), desc(Order.id))
            .limit(RECENT_ORDERS_LIMIT)
        )
        # Serialize while the session is still open
        return [OrderResponse.from_order(order) for order in result.scalars().all()]

    @staticmethod
    async def get_retailer_overview(retailer_id: int) -> RetailerOverviewResponse:
        """
        Build the retailer overview.

        Returns:
            totalOrders, totalSpent, pendingPayments, recentOrders

        Raises:
            DatabaseError: If any of the queries fails. No partial overview is returned.
        """
        started = time.perf_counter()
        try:
            stats, pending_payments, recent_orders = await asyncio.gather(
                run_db(lambda db: RetailerDashboardService.get_order_stats(db, retailer_id)),
                run_db(lambda db: RetailerDashboardService.count_pending_orders(db, retailer_id)),
                run_db(lambda db: RetailerDashboardService.find_recent_orders(db, retailer_id)),
            )
        except Exception as e:
            logger.error(
                f"Dashboard error for retailer {retailer_id}",
                exc_info=e,
            )
            raise DatabaseError("Failed to fetch dashboard data") from e

        logger.debug(
            f"Retailer {retailer_id} overview built in "
            f"{(time.perf_counter() - started) * 1000:.1f}ms"
        )

        return RetailerOverviewResponse(
            totalOrders=stats.total_orders,
            totalSpent=float(stats.total_spent),
            pendingPayments=pending_payments,
            recentOrders=recent_orders,
        )
