"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from datetime import date, datetime

import pytest
from httpx import ASGITransport, AsyncClient

from shopledger.api.main import app
from shopledger.core.entities import (
    Category,
    ClosureReason,
    Purchase,
    Sale,
    ShopClosure,
)


def make_category(id: int = 1, name: str = "Rice") -> Category:
    return Category(id=id, name=name)


def make_purchase(
    id: int = 1,
    category_id: int = 1,
    quantity: int = 100,
    total_cost: float = 5000.0,
    selling_price_per_item: float = 60.0,
    day: date = date(2024, 3, 11),
    category_name: str = "Rice",
    created_at: datetime | None = None,
) -> Purchase:
    return Purchase(
        id=id,
        date=day,
        category_id=category_id,
        category_name=category_name,
        quantity=quantity,
        total_cost=total_cost,
        selling_price_per_item=selling_price_per_item,
        created_at=created_at or datetime(2024, 3, 11, 9, 0),
    )


def make_sale(
    id: int = 1,
    category_id: int = 1,
    quantity: int = 1,
    selling_price_per_item: float = 60.0,
    day: date = date(2024, 3, 13),
    category_name: str = "Rice",
    created_at: datetime | None = None,
) -> Sale:
    return Sale(
        id=id,
        date=day,
        category_id=category_id,
        category_name=category_name,
        quantity=quantity,
        selling_price_per_item=selling_price_per_item,
        created_at=created_at or datetime(2024, 3, 13, 12, 0),
    )


def make_closure(
    day: date,
    is_full_day: bool = True,
    reason: ClosureReason = ClosureReason.HOLIDAY,
    id: int | None = None,
    closed_hours: float = 0.0,
) -> ShopClosure:
    return ShopClosure(
        id=id,
        date=day,
        reason=reason,
        is_full_day=is_full_day,
        closed_hours=closed_hours,
    )


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client. Lifespan does not run under ASGITransport."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def category_factory():
    return make_category


@pytest.fixture
def purchase_factory():
    return make_purchase


@pytest.fixture
def sale_factory():
    return make_sale


@pytest.fixture
def closure_factory():
    return make_closure
