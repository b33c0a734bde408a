"""Fixtures for API tests: the real use cases over mocked ledger stores."""

from collections.abc import Generator
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from shopledger.api.dependencies import (
    get_category_store,
    get_closure_store,
    get_purchase_store,
    get_sale_store,
)
from shopledger.api.main import app


@pytest.fixture
def stores() -> Generator[SimpleNamespace, None, None]:
    stores = SimpleNamespace(
        category=AsyncMock(),
        purchase=AsyncMock(),
        sale=AsyncMock(),
        closure=AsyncMock(),
    )
    stores.category.list_categories.return_value = []
    stores.category.get_by_name.return_value = None
    stores.purchase.list_purchases.return_value = []
    stores.sale.list_sales.return_value = []
    stores.closure.list_closures.return_value = []
    stores.closure.get_by_date.return_value = None

    app.dependency_overrides[get_category_store] = lambda: stores.category
    app.dependency_overrides[get_purchase_store] = lambda: stores.purchase
    app.dependency_overrides[get_sale_store] = lambda: stores.sale
    app.dependency_overrides[get_closure_store] = lambda: stores.closure
    yield stores
    app.dependency_overrides.clear()
