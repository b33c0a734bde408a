"""
Analytics Aggregator.

Composes the stock calculator, closure calendar and time-bucketing engine
into the dashboard, inventory and sales report payloads. Every call
re-reads the ledgers; a store failure aborts the whole report.
"""

from __future__ import annotations

import calendar as _calendar
from collections import defaultdict
from datetime import date, timedelta

from shopledger.config import get_logger
from shopledger.config.settings import AnalyticsSettings
from shopledger.core.entities.reports import (
    CategoryInventoryReport,
    ClosureStatsReport,
    DailySalesReport,
    DashboardReport,
    DashboardSummary,
    DayOfWeekSalesReport,
    InventoryReport,
    InventorySummary,
    LowStockItem,
    MonthlyCost,
    MonthlyRevenue,
    TopCategory,
    WeeklySalesReport,
)
from shopledger.core.entities.transaction import Purchase, Sale
from shopledger.core.exceptions import CategoryNotFoundError, InvalidDateRangeError
from shopledger.core.interfaces.ledger_store import (
    ICategoryStore,
    IPurchaseStore,
    ISaleStore,
    IShopClosureStore,
    LedgerFilter,
)
from shopledger.core.services.closure_calendar import ClosureCalendar
from shopledger.core.services.money import round2
from shopledger.core.services.stock_calculator import StockCalculator
from shopledger.core.services.time_bucketing import TimeBucketingEngine

logger = get_logger(__name__)


def months_ago(day: date, months: int) -> date:
    """Same day-of-month ``months`` earlier, clamped to the month's end."""
    month_index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = _calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def resolve_range(
    start: date | None,
    end: date | None,
    default_span: timedelta,
    today: date | None = None,
) -> tuple[date, date]:
    """Fill in a missing report window and reject inverted ranges."""
    end = end or today or date.today()
    start = start or end - default_span
    if start > end:
        raise InvalidDateRangeError(start, end)
    return start, end


class AnalyticsAggregator:
    """Read-only reporting over the four ledger stores."""

    def __init__(
        self,
        category_store: ICategoryStore,
        purchase_store: IPurchaseStore,
        sale_store: ISaleStore,
        closure_store: IShopClosureStore,
        settings: AnalyticsSettings | None = None,
    ) -> None:
        self._category_store = category_store
        self._purchase_store = purchase_store
        self._sale_store = sale_store
        self._closure_store = closure_store
        self._settings = settings or AnalyticsSettings()
        self._buckets = TimeBucketingEngine()

    # --- Dashboard ---

    async def dashboard(self, today: date | None = None) -> DashboardReport:
        """Headline totals, top categories, recent activity and trends."""
        today = today or date.today()
        cfg = self._settings

        categories = await self._category_store.list_categories()
        purchases = await self._purchase_store.list_purchases()
        sales = await self._sale_store.list_sales()

        total_cost = sum(p.total_cost for p in purchases)
        total_revenue = sum(s.total_amount for s in sales)
        purchased_items = sum(p.quantity for p in purchases)
        sold_items = sum(s.quantity for s in sales)
        profit = total_revenue - total_cost
        profit_margin = profit / total_revenue * 100 if total_revenue > 0 else 0.0

        summary = DashboardSummary(
            total_categories=len(categories),
            total_purchases=len(purchases),
            total_sales=len(sales),
            total_purchase_cost=round2(total_cost),
            total_revenue=round2(total_revenue),
            profit=round2(profit),
            profit_margin=round2(profit_margin),
            total_purchased_items=purchased_items,
            total_sold_items=sold_items,
            remaining_stock=purchased_items - sold_items,
        )

        low_stock = [
            LowStockItem(
                category_id=level.category_id,
                category=level.category,
                remaining=level.remaining,
            )
            for level in StockCalculator.stock_levels(categories, purchases, sales)
            if 0 < level.remaining <= cfg.low_stock_threshold
        ]

        trend_start = months_ago(today, cfg.trend_months)
        limit = cfg.recent_transactions_limit

        report = DashboardReport(
            summary=summary,
            top_categories=self._top_categories(sales, cfg.top_categories_limit),
            recent_purchases=self._most_recent(purchases, limit),
            recent_sales=self._most_recent(sales, limit),
            monthly_sales=self._monthly_revenue(sales, trend_start),
            monthly_purchases=self._monthly_cost(purchases, trend_start),
            low_stock_items=low_stock,
        )

        logger.info(
            "dashboard_computed",
            categories=summary.total_categories,
            purchases=summary.total_purchases,
            sales=summary.total_sales,
            low_stock=len(low_stock),
        )
        return report

    @staticmethod
    def _top_categories(sales: list[Sale], limit: int) -> list[TopCategory]:
        grouped: dict[int, TopCategory] = {}
        for sale in sales:
            entry = grouped.get(sale.category_id)
            if entry is None:
                # First name seen in ledger order wins.
                entry = TopCategory(
                    category_id=sale.category_id,
                    category=sale.category_name,
                    revenue=0.0,
                    quantity=0,
                    transactions=0,
                )
                grouped[sale.category_id] = entry
            entry.revenue += sale.total_amount
            entry.quantity += sale.quantity
            entry.transactions += 1

        ranked = sorted(grouped.values(), key=lambda c: c.revenue, reverse=True)
        for entry in ranked:
            entry.revenue = round2(entry.revenue)
        return ranked[:limit]

    @staticmethod
    def _most_recent(records: list, limit: int) -> list:
        return sorted(records, key=lambda r: r.created_at, reverse=True)[:limit]

    @staticmethod
    def _monthly_revenue(sales: list[Sale], since: date) -> list[MonthlyRevenue]:
        months: dict[tuple[int, int], list[float]] = defaultdict(lambda: [0.0, 0, 0])
        for sale in sales:
            if sale.date < since:
                continue
            bucket = months[(sale.date.year, sale.date.month)]
            bucket[0] += sale.total_amount
            bucket[1] += sale.quantity
            bucket[2] += 1

        return [
            MonthlyRevenue(
                year=year,
                month=month,
                revenue=round2(revenue),
                quantity=quantity,
                transactions=count,
            )
            for (year, month), (revenue, quantity, count) in sorted(months.items())
        ]

    @staticmethod
    def _monthly_cost(purchases: list[Purchase], since: date) -> list[MonthlyCost]:
        months: dict[tuple[int, int], list[float]] = defaultdict(lambda: [0.0, 0, 0])
        for purchase in purchases:
            if purchase.date < since:
                continue
            bucket = months[(purchase.date.year, purchase.date.month)]
            bucket[0] += purchase.total_cost
            bucket[1] += purchase.quantity
            bucket[2] += 1

        return [
            MonthlyCost(
                year=year,
                month=month,
                cost=round2(cost),
                quantity=quantity,
                transactions=count,
            )
            for (year, month), (cost, quantity, count) in sorted(months.items())
        ]

    # --- Inventory ---

    async def inventory(self) -> InventoryReport:
        """Stock level of every category plus overall valuation."""
        categories = await self._category_store.list_categories()
        purchases = await self._purchase_store.list_purchases()
        sales = await self._sale_store.list_sales()

        levels = StockCalculator.stock_levels(categories, purchases, sales)

        return InventoryReport(
            inventory=levels,
            summary=InventorySummary(
                total_remaining_items=sum(level.remaining for level in levels),
                total_stock_value=round2(sum(level.cost_value for level in levels)),
                total_potential_value=round2(
                    sum(level.selling_value for level in levels)
                ),
                total_categories=len(categories),
            ),
        )

    async def category_inventory(self, category_id: int) -> CategoryInventoryReport:
        """One category's stock level with its purchases and sales, newest first."""
        category = await self._category_store.get(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)

        ledger_filter = LedgerFilter(category_id=category_id)
        purchases = await self._purchase_store.list_purchases(ledger_filter)
        sales = await self._sale_store.list_sales(ledger_filter)

        level = StockCalculator.tally(purchases, sales).to_stock_level(
            category.id, category.name
        )
        return CategoryInventoryReport(
            **level.model_dump(),
            purchases=purchases,
            sales=sales,
        )

    # --- Sales reports ---

    async def _window(
        self, start: date, end: date
    ) -> tuple[list[Sale], ClosureCalendar]:
        sales = await self._sale_store.list_sales(
            LedgerFilter(start_date=start, end_date=end)
        )
        closures = await ClosureCalendar.load(self._closure_store, start, end)
        return sales, closures

    async def weekly_report(
        self, start: date | None = None, end: date | None = None
    ) -> WeeklySalesReport:
        start, end = resolve_range(
            start, end, timedelta(weeks=self._settings.weekly_default_weeks)
        )
        sales, closures = await self._window(start, end)
        logger.debug("weekly_report", start=start, end=end, sales=len(sales))
        return self._buckets.weekly(sales, closures, start, end)

    async def day_of_week_report(
        self, start: date | None = None, end: date | None = None
    ) -> DayOfWeekSalesReport:
        start, end = resolve_range(
            start, end, timedelta(weeks=self._settings.day_of_week_default_weeks)
        )
        sales, closures = await self._window(start, end)
        logger.debug("day_of_week_report", start=start, end=end, sales=len(sales))
        return self._buckets.day_of_week(sales, closures, start, end)

    async def daily_report(
        self, start: date | None = None, end: date | None = None
    ) -> DailySalesReport:
        # Window is inclusive on both ends, hence the minus one.
        start, end = resolve_range(
            start, end, timedelta(days=self._settings.daily_default_days - 1)
        )
        sales, closures = await self._window(start, end)
        logger.debug("daily_report", start=start, end=end, sales=len(sales))
        return self._buckets.daily(sales, closures, start, end)

    # --- Closures ---

    async def closure_stats(
        self, start: date | None = None, end: date | None = None
    ) -> ClosureStatsReport:
        start, end = resolve_range(
            start, end, timedelta(days=self._settings.closure_stats_default_days)
        )
        closures = await ClosureCalendar.load(self._closure_store, start, end)
        return ClosureStatsReport(data=closures.stats(start, end))
