"""Tests for the wholesaler overview endpoint and aggregator."""

import asyncio

import pytest
from sqlalchemy.exc import OperationalError

from app.modules.dashboard.constants import LOW_STOCK_THRESHOLD
from app.modules.dashboard.service import DashboardService
from app.modules.orders.models import OrderStatus
from app.modules.users.models import Role

OVERVIEW_URL = "/api/dashboard/overview"

WHOLESALER_QUERIES = [
    "count_orders",
    "count_pending_orders",
    "sum_revenue",
    "count_customers",
    "find_low_stock_products",
]
STORE_ERRORS = [
    OperationalError("SELECT", {}, Exception("connection lost")),
    ConnectionResetError("connection reset by peer"),
]


class TestWholesalerOverview:
    """GET /api/dashboard/overview"""

    def test_no_orders_yields_zeros(self, client, make_user, auth_headers):
        wholesaler = make_user(Role.WHOLESALER)

        response = client.get(OVERVIEW_URL, headers=auth_headers(wholesaler, Role.WHOLESALER))

        assert response.status_code == 200
        assert response.json() == {
            "totalOrders": 0,
            "pendingOrders": 0,
            "totalRevenue": 0,
            "totalCustomers": 0,
            "lowStockProducts": [],
        }

    def test_mixed_statuses_and_customers(self, client, make_user, make_order, auth_headers):
        wholesaler = make_user(Role.WHOLESALER)
        r1 = make_user(Role.RETAILER)
        r2 = make_user(Role.RETAILER)
        make_order(wholesaler, r1, OrderStatus.delivered, 100)
        make_order(wholesaler, r1, OrderStatus.pending, 50)
        make_order(wholesaler, r2, OrderStatus.shipped, 75)

        body = client.get(OVERVIEW_URL, headers=auth_headers(wholesaler, Role.WHOLESALER)).json()

        assert body["totalOrders"] == 3
        assert body["pendingOrders"] == 1
        assert body["totalRevenue"] == 175
        assert body["totalCustomers"] == 2

    def test_pending_only_orders_earn_no_revenue(self, client, make_user, make_order, auth_headers):
        wholesaler = make_user(Role.WHOLESALER)
        retailer = make_user(Role.RETAILER)
        make_order(wholesaler, retailer, OrderStatus.pending, 40)
        make_order(wholesaler, retailer, OrderStatus.pending, 60)

        body = client.get(OVERVIEW_URL, headers=auth_headers(wholesaler, Role.WHOLESALER)).json()

        assert body["totalOrders"] == 2
        assert body["pendingOrders"] == 2
        assert body["totalRevenue"] == 0

    def test_confirmed_and_cancelled_excluded_from_revenue(
        self, client, make_user, make_order, auth_headers
    ):
        wholesaler = make_user(Role.WHOLESALER)
        retailer = make_user(Role.RETAILER)
        make_order(wholesaler, retailer, OrderStatus.confirmed, 30)
        make_order(wholesaler, retailer, OrderStatus.cancelled, 20)
        make_order(wholesaler, retailer, OrderStatus.delivered, "12.50")

        body = client.get(OVERVIEW_URL, headers=auth_headers(wholesaler, Role.WHOLESALER)).json()

        assert body["totalRevenue"] == 12.5
        assert body["pendingOrders"] == 0

    def test_repeat_customer_counted_once(self, client, make_user, make_order, auth_headers):
        wholesaler = make_user(Role.WHOLESALER)
        retailer = make_user(Role.RETAILER)
        make_order(wholesaler, retailer, OrderStatus.delivered, 10)
        make_order(wholesaler, retailer, OrderStatus.delivered, 10)

        body = client.get(OVERVIEW_URL, headers=auth_headers(wholesaler, Role.WHOLESALER)).json()

        assert body["totalOrders"] == 2
        assert body["totalCustomers"] == 1

    def test_low_stock_threshold_is_inclusive(self, client, make_user, make_product, auth_headers):
        wholesaler = make_user(Role.WHOLESALER)
        make_product(wholesaler, "Rice 25kg", LOW_STOCK_THRESHOLD)
        make_product(wholesaler, "Sugar 50kg", LOW_STOCK_THRESHOLD + 1)
        make_product(wholesaler, "Salt 1kg", 0)

        body = client.get(OVERVIEW_URL, headers=auth_headers(wholesaler, Role.WHOLESALER)).json()

        assert body["lowStockProducts"] == [
            {"name": "Salt 1kg", "stock": 0},
            {"name": "Rice 25kg", "stock": 15},
        ]

    def test_scoped_to_calling_wholesaler(
        self, client, make_user, make_order, make_product, auth_headers
    ):
        mine = make_user(Role.WHOLESALER)
        other = make_user(Role.WHOLESALER)
        retailer = make_user(Role.RETAILER)
        make_order(mine, retailer, OrderStatus.delivered, 100)
        make_order(other, retailer, OrderStatus.delivered, 999)
        make_order(other, retailer, OrderStatus.pending, 5)
        make_product(other, "Not mine", 1)

        body = client.get(OVERVIEW_URL, headers=auth_headers(mine, Role.WHOLESALER)).json()

        assert body == {
            "totalOrders": 1,
            "pendingOrders": 0,
            "totalRevenue": 100,
            "totalCustomers": 1,
            "lowStockProducts": [],
        }

    @pytest.mark.parametrize("query", WHOLESALER_QUERIES)
    @pytest.mark.parametrize("error", STORE_ERRORS, ids=["operational", "connection-reset"])
    def test_store_failure_returns_generic_error(
        self, client, make_user, make_order, auth_headers, monkeypatch, query, error
    ):
        wholesaler = make_user(Role.WHOLESALER)
        retailer = make_user(Role.RETAILER)
        make_order(wholesaler, retailer, OrderStatus.delivered, 100)

        async def broken(db, wholesaler_id):
            raise error

        monkeypatch.setattr(DashboardService, query, broken)

        response = client.get(OVERVIEW_URL, headers=auth_headers(wholesaler, Role.WHOLESALER))

        assert response.status_code == 500
        assert response.json() == {"error": "Server error"}


class TestWholesalerOverviewConcurrency:
    """The five reads are dispatched together, not one after another."""

    def test_queries_overlap(self, monkeypatch):
        in_flight = {"now": 0, "peak": 0}

        def tracked(result):
            async def _query(db, wholesaler_id):
                in_flight["now"] += 1
                in_flight["peak"] = max(in_flight["peak"], in_flight["now"])
                await asyncio.sleep(0.05)
                in_flight["now"] -= 1
                return result

            return _query

        monkeypatch.setattr(DashboardService, "count_orders", tracked(4))
        monkeypatch.setattr(DashboardService, "count_pending_orders", tracked(1))
        monkeypatch.setattr(DashboardService, "sum_revenue", tracked(250))
        monkeypatch.setattr(DashboardService, "count_customers", tracked(3))
        monkeypatch.setattr(DashboardService, "find_low_stock_products", tracked([]))

        overview = asyncio.run(DashboardService.get_wholesaler_overview(1))

        assert in_flight["peak"] == 5
        assert overview.totalOrders == 4
        assert overview.pendingOrders == 1
        assert overview.totalRevenue == 250
        assert overview.totalCustomers == 3
        assert overview.lowStockProducts == []
