"""
Dashboard policy constants shared by the wholesaler and retailer overviews.
These are product policy, not deployment settings, so they stay out of config.
"""

from app.modules.orders.models import OrderStatus

# Products at or below this stock level are flagged for replenishment
LOW_STOCK_THRESHOLD = 15

RECENT_ORDERS_LIMIT = 10

# Only orders in these statuses count as realized revenue
REVENUE_STATUSES = (OrderStatus.delivered, OrderStatus.shipped)

PENDING_STATUS = OrderStatus.pending
