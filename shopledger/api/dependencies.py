"""
Dependency injection container for FastAPI.

Provides store and use case instances to route handlers. Stores share the
connection pool the application created on startup.
"""

from datetime import date

from fastapi import Depends, Query, Request

from shopledger.application.dto.requests import parse_day
from shopledger.application.use_cases import (
    ManageCategoriesUseCase,
    ManageShopClosuresUseCase,
    RecordPurchaseUseCase,
    RecordSaleUseCase,
)
from shopledger.config import Settings, get_settings
from shopledger.core.exceptions import ValidationError
from shopledger.core.interfaces import (
    ICategoryStore,
    IPurchaseStore,
    ISaleStore,
    IShopClosureStore,
)
from shopledger.core.services import AnalyticsAggregator
from shopledger.infrastructure.storage.sqlite import (
    ConnectionPool,
    SQLiteCategoryStore,
    SQLitePurchaseStore,
    SQLiteSaleStore,
    SQLiteShopClosureStore,
)


def get_app_settings() -> Settings:
    return get_settings()


def get_pool(request: Request) -> ConnectionPool:
    """Connection pool created in the application lifespan."""
    return request.app.state.pool


# Store dependencies
def get_category_store(pool: ConnectionPool = Depends(get_pool)) -> ICategoryStore:
    return SQLiteCategoryStore(pool)


def get_purchase_store(pool: ConnectionPool = Depends(get_pool)) -> IPurchaseStore:
    return SQLitePurchaseStore(pool)


def get_sale_store(pool: ConnectionPool = Depends(get_pool)) -> ISaleStore:
    return SQLiteSaleStore(pool)


def get_closure_store(pool: ConnectionPool = Depends(get_pool)) -> IShopClosureStore:
    return SQLiteShopClosureStore(pool)


# Use case dependencies
def get_categories_use_case(
    category_store: ICategoryStore = Depends(get_category_store),
) -> ManageCategoriesUseCase:
    return ManageCategoriesUseCase(category_store)


def get_purchase_use_case(
    purchase_store: IPurchaseStore = Depends(get_purchase_store),
    category_store: ICategoryStore = Depends(get_category_store),
) -> RecordPurchaseUseCase:
    return RecordPurchaseUseCase(purchase_store, category_store)


def get_sale_use_case(
    sale_store: ISaleStore = Depends(get_sale_store),
    purchase_store: IPurchaseStore = Depends(get_purchase_store),
    category_store: ICategoryStore = Depends(get_category_store),
) -> RecordSaleUseCase:
    return RecordSaleUseCase(sale_store, purchase_store, category_store)


def get_closures_use_case(
    closure_store: IShopClosureStore = Depends(get_closure_store),
) -> ManageShopClosuresUseCase:
    return ManageShopClosuresUseCase(closure_store)


def get_analytics(
    category_store: ICategoryStore = Depends(get_category_store),
    purchase_store: IPurchaseStore = Depends(get_purchase_store),
    sale_store: ISaleStore = Depends(get_sale_store),
    closure_store: IShopClosureStore = Depends(get_closure_store),
    settings: Settings = Depends(get_app_settings),
) -> AnalyticsAggregator:
    return AnalyticsAggregator(
        category_store,
        purchase_store,
        sale_store,
        closure_store,
        settings=settings.analytics,
    )


# Query parameters
def _day_param(name: str, value: str | None) -> date | None:
    if value is None or value == "":
        return None
    day = parse_day(value)
    if not isinstance(day, date):
        raise ValidationError(name, "Expected a date in YYYY-MM-DD format", value)
    return day


class DateRangeParams:
    """``startDate`` / ``endDate`` query parameters as calendar days."""

    def __init__(
        self,
        start_date: str | None = Query(default=None, alias="startDate"),
        end_date: str | None = Query(default=None, alias="endDate"),
    ):
        self.start = _day_param("startDate", start_date)
        self.end = _day_param("endDate", end_date)
