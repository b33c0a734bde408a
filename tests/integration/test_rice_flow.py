"""End-to-end ledger flow over a real migrated SQLite database."""

from collections.abc import AsyncGenerator
from datetime import date
from pathlib import Path

import pytest

from shopledger.application.dto.requests import (
    CreateCategoryRequest,
    CreatePurchaseRequest,
    CreateSaleRequest,
    CreateShopClosureRequest,
    UpdateCategoryRequest,
)
from shopledger.application.use_cases import (
    ManageCategoriesUseCase,
    ManageShopClosuresUseCase,
    RecordPurchaseUseCase,
    RecordSaleUseCase,
)
from shopledger.core.exceptions import InsufficientStockError
from shopledger.core.services import AnalyticsAggregator
from shopledger.infrastructure.storage.sqlite import (
    ConnectionPool,
    SQLiteCategoryStore,
    SQLitePurchaseStore,
    SQLiteSaleStore,
    SQLiteShopClosureStore,
)
from shopledger.infrastructure.storage.sqlite.migrations.migrator import (
    initialize_database,
)


@pytest.fixture
async def ledger(tmp_path: Path) -> AsyncGenerator[dict, None]:
    db_path = tmp_path / "ledger.db"
    await initialize_database(db_path, create_backup_before=False)
    pool = ConnectionPool(db_path, pool_size=2)
    await pool.initialize()

    categories = SQLiteCategoryStore(pool)
    purchases = SQLitePurchaseStore(pool)
    sales = SQLiteSaleStore(pool)
    closures = SQLiteShopClosureStore(pool)

    yield {
        "categories": ManageCategoriesUseCase(categories),
        "purchases": RecordPurchaseUseCase(purchases, categories),
        "sales": RecordSaleUseCase(sales, purchases, categories),
        "closures": ManageShopClosuresUseCase(closures),
        "analytics": AnalyticsAggregator(categories, purchases, sales, closures),
    }
    await pool.close()


async def test_rice_purchase_sale_and_valuation(ledger):
    rice = await ledger["categories"].create(CreateCategoryRequest(name="Rice"))
    await ledger["purchases"].create(
        CreatePurchaseRequest(
            date=date(2024, 3, 11),
            category_id=rice.id,
            quantity=100,
            total_cost=5000,
            selling_price_per_item=60,
        )
    )

    sale = await ledger["sales"].create(
        CreateSaleRequest(
            date=date(2024, 3, 13),
            category_id=rice.id,
            quantity=30,
            selling_price_per_item=60,
        )
    )
    assert sale.total_amount == 1800.0

    with pytest.raises(InsufficientStockError) as exc_info:
        await ledger["sales"].create(
            CreateSaleRequest(category_id=rice.id, quantity=71, selling_price_per_item=60)
        )
    assert exc_info.value.available == 70

    level = await ledger["analytics"].category_inventory(rice.id)
    assert level.remaining == 70
    assert level.avg_cost_per_item == 50.0
    assert level.cost_value == 3500.0
    assert level.selling_value == 4200.0


async def test_rename_keeps_transaction_snapshot(ledger):
    rice = await ledger["categories"].create(CreateCategoryRequest(name="Rice"))
    purchase = await ledger["purchases"].create(
        CreatePurchaseRequest(
            category_id=rice.id, quantity=5, total_cost=50, selling_price_per_item=12
        )
    )

    await ledger["categories"].update(rice.id, UpdateCategoryRequest(name="Basmati"))

    stored = await ledger["purchases"].get(purchase.id)
    assert stored.category_name == "Rice"
    inventory = await ledger["analytics"].inventory()
    assert inventory.inventory[0].category == "Basmati"


async def test_weekly_report_with_closure(ledger):
    rice = await ledger["categories"].create(CreateCategoryRequest(name="Rice"))
    await ledger["purchases"].create(
        CreatePurchaseRequest(
            date=date(2024, 3, 1),
            category_id=rice.id,
            quantity=100,
            total_cost=1000,
            selling_price_per_item=20,
        )
    )
    for day in (11, 13, 17):
        await ledger["sales"].create(
            CreateSaleRequest(
                date=date(2024, 3, day),
                category_id=rice.id,
                quantity=1,
                selling_price_per_item=20,
            )
        )
    await ledger["closures"].create(
        CreateShopClosureRequest(date=date(2024, 3, 12), reason="Holiday")
    )

    report = await ledger["analytics"].weekly_report(date(2024, 3, 1), date(2024, 3, 31))

    assert len(report.data) == 1
    week = report.data[0]
    assert week.week_start == "2024-03-11"
    assert week.transaction_count == 3
    assert week.total_revenue == "60.00"
    assert week.open_days == 6
    assert week.average_revenue_per_open_day == "10.00"
