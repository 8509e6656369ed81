"""Shared test fixtures for the wholesale portal API."""

import asyncio
import os
import tempfile
from datetime import datetime, timedelta
from decimal import Decimal

# The engine is built from config at import time, so point it at a scratch
# database before anything under app/ is imported.
_DB_DIR = tempfile.mkdtemp(prefix="wholesale-tests-")
os.environ["DB_URL"] = f"sqlite+aiosqlite:///{_DB_DIR}/test.db"
os.environ["JWT_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient

from app.core.db.engine import AsyncSessionLocal, init_models
from app.main import app
from app.modules.orders.models import Order, OrderItem, OrderStatus
from app.modules.products.models import Product
from app.modules.users.auth import AuthService
from app.modules.users.models import Role, User

BASE_TIME = datetime(2026, 1, 1, 9, 0, 0)


def _persist(*objects):
    async def _add():
        async with AsyncSessionLocal() as session:
            session.add_all(objects)
            await session.commit()

    asyncio.run(_add())
    return objects


@pytest.fixture(autouse=True)
def fresh_database():
    """Every test starts from empty tables."""
    asyncio.run(init_models(drop=True))
    yield


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_user():
    counter = {"n": 0}

    def _make_user(role: Role, name: str | None = None) -> int:
        counter["n"] += 1
        user = User(
            name=name or f"{role.value}-{counter['n']}",
            email=f"{role.value}{counter['n']}@example.com",
            role=role,
        )
        _persist(user)
        return user.id

    return _make_user


@pytest.fixture
def make_product():
    def _make_product(wholesaler_id: int, name: str, stock: int, price: str = "10.00") -> int:
        product = Product(
            wholesaler_id=wholesaler_id, name=name, stock=stock, price=Decimal(price)
        )
        _persist(product)
        return product.id

    return _make_product


@pytest.fixture
def make_order():
    counter = {"n": 0}

    def _make_order(
        wholesaler_id: int,
        retailer_id: int,
        status: OrderStatus = OrderStatus.pending,
        total: str | int = 0,
        created_at: datetime | None = None,
        items: list[tuple[int, int, str]] | None = None,
    ) -> int:
        counter["n"] += 1
        when = created_at or BASE_TIME + timedelta(minutes=counter["n"])
        order = Order(
            wholesaler_id=wholesaler_id,
            retailer_id=retailer_id,
            status=status,
            total=Decimal(str(total)),
            created_at=when,
            updated_at=when,
            items=[
                OrderItem(product_id=product_id, quantity=quantity, price=Decimal(price))
                for product_id, quantity, price in (items or [])
            ],
        )
        _persist(order)
        return order.id

    return _make_order


@pytest.fixture
def auth_headers():
    def _auth_headers(user_id: int, role: Role | str) -> dict:
        role_value = role.value if isinstance(role, Role) else role
        token = AuthService.create_access_token(
            {"sub": f"user-{user_id}", "user_id": user_id, "role": role_value}
        )
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers
