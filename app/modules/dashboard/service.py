"""
DashboardService - aggregates the wholesaler overview.
Every statistic is an independent read over the wholesaler's own records, so all
of them are issued concurrently and joined before the response is built.
"""

import asyncio
import logging
import time
from decimal import Decimal
from typing import List
from sqlalchemy import select, func, distinct
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db.engine import run_db
from app.core.exceptions import DatabaseError
from app.modules.orders.models import Order
from app.modules.products.models import Product
from .constants import LOW_STOCK_THRESHOLD, PENDING_STATUS, REVENUE_STATUSES
from .schemas import LowStockProductResponse, WholesalerOverviewResponse

logger = logging.getLogger(__name__)


class DashboardService:
    """
    Wholesaler dashboard service.
    Each query runs through run_db() in its own session so the five reads can overlap.
    """

    @staticmethod
    async def count_orders(db: AsyncSession, wholesaler_id: int) -> int:
        return await db.scalar(
            select(func.count(Order.id)).where(Order.wholesaler_id == wholesaler_id)
        ) or 0

    @staticmethod
    async def count_pending_orders(db: AsyncSession, wholesaler_id: int) -> int:
        return await db.scalar(
            select(func.count(Order.id)).where(
                Order.wholesaler_id == wholesaler_id,
                Order.status == PENDING_STATUS,
            )
        ) or 0

    @staticmethod
    async def sum_revenue(db: AsyncSession, wholesaler_id: int) -> Decimal:
        """Revenue counts delivered and shipped orders only; in-flight orders are excluded."""
        return await db.scalar(
            select(func.sum(Order.total)).where(
                Order.wholesaler_id == wholesaler_id,
                Order.status.in_(REVENUE_STATUSES),
            )
        ) or Decimal("0")

    @staticmethod
    async def count_customers(db: AsyncSession, wholesaler_id: int) -> int:
        """Distinct retailers, not orders."""
        return await db.scalar(
            select(func.count(distinct(Order.retailer_id))).where(
                Order.wholesaler_id == wholesaler_id
            )
        ) or 0

    @staticmethod
    async def find_low_stock_products(
        db: AsyncSession, wholesaler_id: int
    ) -> List[LowStockProductResponse]:
        result = await db.execute(
            select(Product.name, Product.stock)
            .where(
                Product.wholesaler_id == wholesaler_id,
                Product.stock <= LOW_STOCK_THRESHOLD,
            )
            .order_by(Product.stock, Product.id)
        )
        return [
            LowStockProductResponse(name=row.name, stock=row.stock)
            for row in result.all()
        ]

    @staticmethod
    async def get_wholesaler_overview(wholesaler_id: int) -> WholesalerOverviewResponse:
        """
        Build the wholesaler overview.

        Returns:
            totalOrders, pendingOrders, totalRevenue, totalCustomers, lowStockProducts

        Raises:
            DatabaseError: If any of the queries fails. No partial overview is returned.
        """
        started = time.perf_counter()
        try:
            (
                total_orders,
                pending_orders,
                total_revenue,
                total_customers,
                low_stock_products,
            ) = await asyncio.gather(
                run_db(lambda db: DashboardService.count_orders(db, wholesaler_id)),
                run_db(lambda db: DashboardService.count_pending_orders(db, wholesaler_id)),
                run_db(lambda db: DashboardService.sum_revenue(db, wholesaler_id)),
                run_db(lambda db: DashboardService.count_customers(db, wholesaler_id)),
                run_db(lambda db: DashboardService.find_low_stock_products(db, wholesaler_id)),
            )
        except Exception as e:
            logger.error(
                f"Error fetching dashboard overview for wholesaler {wholesaler_id}",
                exc_info=e,
            )
            raise DatabaseError("Server error") from e

        logger.debug(
            f"Wholesaler {wholesaler_id} overview built in "
            f"{(time.perf_counter() - started) * 1000:.1f}ms"
        )

        return WholesalerOverviewResponse(
            totalOrders=total_orders,
            pendingOrders=pending_orders,
            totalRevenue=float(total_revenue),
            totalCustomers=total_customers,
            lowStockProducts=low_stock_products,
        )
