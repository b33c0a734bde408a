"""Core domain entities."""

from shopledger.core.entities.base import LedgerModel
from shopledger.core.entities.category import Category
from shopledger.core.entities.reports import (
    CategoryInventoryReport,
    ClosureInfo,
    ClosureStats,
    ClosureStatsReport,
    DailyBucket,
    DailySalesReport,
    DailySummary,
    DashboardReport,
    DashboardSummary,
    DateRange,
    DayHighlight,
    DayOfWeekBucket,
    DayOfWeekSalesReport,
    DayOfWeekSummary,
    InventoryReport,
    InventorySummary,
    LowStockItem,
    MonthlyCost,
    MonthlyRevenue,
    StockLevel,
    TopCategory,
    WeeklyBucket,
    WeeklySalesReport,
    WeeklySummary,
)
from shopledger.core.entities.shop_closure import ClosureReason, ShopClosure
from shopledger.core.entities.transaction import Purchase, Sale

__all__ = [
    "LedgerModel",
    # Ledger entities
    "Category",
    "Purchase",
    "Sale",
    "ShopClosure",
    "ClosureReason",
    # Stock reports
    "StockLevel",
    "InventoryReport",
    "InventorySummary",
    "CategoryInventoryReport",
    # Closure reports
    "ClosureInfo",
    "ClosureStats",
    "ClosureStatsReport",
    "DateRange",
    # Sales reports
    "DailyBucket",
    "DailySummary",
    "DailySalesReport",
    "WeeklyBucket",
    "WeeklySummary",
    "WeeklySalesReport",
    "DayOfWeekBucket",
    "DayHighlight",
    "DayOfWeekSummary",
    "DayOfWeekSalesReport",
    # Dashboard
    "DashboardReport",
    "DashboardSummary",
    "TopCategory",
    "MonthlyRevenue",
    "MonthlyCost",
    "LowStockItem",
]
