"""Derived (never persisted) report models.

Money values in the weekly and day-of-week views are two-decimal strings;
everywhere else they are rounded floats.
"""

import datetime as dt

from pydantic import Field

from shopledger.core.entities.base import LedgerModel
from shopledger.core.entities.shop_closure import ClosureReason
from shopledger.core.entities.transaction import Purchase, Sale


class DateRange(LedgerModel):
    start: dt.date
    end: dt.date


# --- Stock ---


class StockLevel(LedgerModel):
    """Stock position and valuation of one category."""

    category_id: int
    category: str
    total_bought: int = 0
    total_sold: int = 0
    remaining: int = 0
    avg_cost_per_item: float = 0.0
    avg_selling_price: float = 0.0
    cost_value: float = 0.0
    selling_value: float = 0.0


class InventorySummary(LedgerModel):
    total_remaining_items: int = 0
    total_stock_value: float = 0.0
    total_potential_value: float = 0.0
    total_categories: int = 0


class InventoryReport(LedgerModel):
    inventory: list[StockLevel] = Field(default_factory=list)
    summary: InventorySummary = Field(default_factory=InventorySummary)


class CategoryInventoryReport(StockLevel):
    """Stock level of one category with the ledger entries behind it."""

    purchases: list[Purchase] = Field(default_factory=list)
    sales: list[Sale] = Field(default_factory=list)


# --- Closures ---


class ClosureInfo(LedgerModel):
    date: dt.date
    reason: ClosureReason
    description: str = ""
    is_full_day: bool = True
    closed_hours: float = 0.0


class ClosureStats(LedgerModel):
    total_closures: int = 0
    total_full_days: int = 0
    total_partial_days: int = 0
    by_reason: dict[str, int] = Field(default_factory=dict)
    date_range: DateRange


class ClosureStatsReport(LedgerModel):
    success: bool = True
    data: ClosureStats


# --- Daily ---


class DailyBucket(LedgerModel):
    date: dt.date
    day_of_week: str
    total_revenue: float = 0.0
    total_quantity: int = 0
    transaction_count: int = 0
    is_closed: bool = False
    closure_info: ClosureInfo | None = None


class DailySummary(LedgerModel):
    date_range: DateRange
    total_days: int
    total_revenue: float = 0.0
    total_transactions: int = 0
    days_with_sales: int = 0
    closed_days: float = 0.0
    open_days: float = 0.0
    average_revenue_per_open_day: float = 0.0


class DailySalesReport(LedgerModel):
    success: bool = True
    data: list[DailyBucket] = Field(default_factory=list)
    summary: DailySummary


# --- Weekly ---


class WeeklyBucket(LedgerModel):
    week_start: str
    week_end: str
    week_label: str
    total_revenue: str = "0.00"
    total_quantity: int = 0
    transaction_count: int = 0
    average_per_transaction: str = "0.00"
    closed_days: float = 0.0
    open_days: float = 7.0
    average_revenue_per_open_day: str = "0.00"
    closures: list[ClosureInfo] = Field(default_factory=list)


class WeeklySummary(LedgerModel):
    date_range: DateRange
    total_weeks: int = 0
    total_revenue: str = "0.00"
    total_transactions: int = 0
    average_weekly_revenue: str = "0.00"
    total_closed_days: float = 0.0


class WeeklySalesReport(LedgerModel):
    success: bool = True
    data: list[WeeklyBucket] = Field(default_factory=list)
    summary: WeeklySummary


# --- Day of week ---


class DayOfWeekBucket(LedgerModel):
    day_name: str
    total_revenue: str = "0.00"
    total_quantity: int = 0
    transaction_count: int = 0
    average_per_transaction: str = "0.00"
    total_occurrences: int = 0
    full_day_closures: int = 0
    open_count: int = 0
    average_revenue_per_open_day: str = "0.00"


class DayHighlight(LedgerModel):
    name: str
    revenue: str


class DayOfWeekSummary(LedgerModel):
    date_range: DateRange
    total_revenue: str = "0.00"
    total_transactions: int = 0
    best_day: DayHighlight
    worst_day: DayHighlight


class DayOfWeekSalesReport(LedgerModel):
    success: bool = True
    data: list[DayOfWeekBucket] = Field(default_factory=list)
    summary: DayOfWeekSummary


# --- Dashboard ---


class DashboardSummary(LedgerModel):
    total_categories: int = 0
    total_purchases: int = 0
    total_sales: int = 0
    total_purchase_cost: float = 0.0
    total_revenue: float = 0.0
    profit: float = 0.0
    profit_margin: float = 0.0
    total_purchased_items: int = 0
    total_sold_items: int = 0
    remaining_stock: int = 0


class TopCategory(LedgerModel):
    category_id: int
    category: str
    revenue: float
    quantity: int
    transactions: int


class MonthlyRevenue(LedgerModel):
    year: int
    month: int
    revenue: float
    quantity: int
    transactions: int


class MonthlyCost(LedgerModel):
    year: int
    month: int
    cost: float
    quantity: int
    transactions: int


class LowStockItem(LedgerModel):
    category_id: int
    category: str
    remaining: int


class DashboardReport(LedgerModel):
    summary: DashboardSummary
    top_categories: list[TopCategory] = Field(default_factory=list)
    recent_purchases: list[Purchase] = Field(default_factory=list)
    recent_sales: list[Sale] = Field(default_factory=list)
    monthly_sales: list[MonthlyRevenue] = Field(default_factory=list)
    monthly_purchases: list[MonthlyCost] = Field(default_factory=list)
    low_stock_items: list[LowStockItem] = Field(default_factory=list)
