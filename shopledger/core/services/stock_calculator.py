"""
Stock Calculator.

Derives on-hand quantity and valuation of a category from the purchase and
sale ledgers. Nothing here is persisted; every call re-scans the ledgers.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from shopledger.config import get_logger
from shopledger.core.entities.category import Category
from shopledger.core.entities.reports import StockLevel
from shopledger.core.entities.transaction import Purchase, Sale
from shopledger.core.interfaces.ledger_store import (
    IPurchaseStore,
    ISaleStore,
    LedgerFilter,
)
from shopledger.core.services.money import round2, safe_div

logger = get_logger(__name__)


@dataclass
class StockTally:
    """Raw (unrounded) aggregation of one category's ledgers."""

    total_bought: int = 0
    total_sold: int = 0
    total_cost: float = 0.0
    selling_price_sum: float = 0.0
    purchase_count: int = 0

    @property
    def remaining(self) -> int:
        # May go negative when sales were edited past stock.
        return self.total_bought - self.total_sold

    @property
    def avg_cost_per_item(self) -> float:
        return safe_div(self.total_cost, self.total_bought)

    @property
    def avg_selling_price(self) -> float:
        # Mean over purchase records, not weighted by quantity.
        return safe_div(self.selling_price_sum, self.purchase_count)

    def add_purchase(self, purchase: Purchase) -> None:
        self.total_bought += purchase.quantity
        self.total_cost += purchase.total_cost
        self.selling_price_sum += purchase.selling_price_per_item
        self.purchase_count += 1

    def add_sale(self, sale: Sale) -> None:
        self.total_sold += sale.quantity

    def to_stock_level(self, category_id: int, category_name: str) -> StockLevel:
        remaining = self.remaining
        avg_cost = self.avg_cost_per_item
        avg_selling = self.avg_selling_price
        return StockLevel(
            category_id=category_id,
            category=category_name,
            total_bought=self.total_bought,
            total_sold=self.total_sold,
            remaining=remaining,
            avg_cost_per_item=round2(avg_cost),
            avg_selling_price=round2(avg_selling),
            cost_value=round2(remaining * avg_cost),
            selling_value=round2(remaining * avg_selling),
        )


class StockCalculator:
    """
    Single source of truth for stock arithmetic.

    Used by the inventory views, the dashboard low-stock scan and the
    sale-creation guard.
    """

    def __init__(self, purchase_store: IPurchaseStore, sale_store: ISaleStore) -> None:
        self._purchase_store = purchase_store
        self._sale_store = sale_store

    @staticmethod
    def tally(purchases: Iterable[Purchase], sales: Iterable[Sale]) -> StockTally:
        """Aggregate purchases and sales (assumed to share one category)."""
        result = StockTally()
        for purchase in purchases:
            result.add_purchase(purchase)
        for sale in sales:
            result.add_sale(sale)
        return result

    async def _tally_category(self, category_id: int) -> StockTally:
        ledger_filter = LedgerFilter(category_id=category_id)
        purchases = await self._purchase_store.list_purchases(ledger_filter)
        sales = await self._sale_store.list_sales(ledger_filter)
        return self.tally(purchases, sales)

    async def available_stock(self, category_id: int) -> int:
        """Units on hand: purchased minus sold."""
        result = await self._tally_category(category_id)
        logger.debug(
            "stock_computed",
            category_id=category_id,
            bought=result.total_bought,
            sold=result.total_sold,
        )
        return result.remaining

    async def stock_level(self, category: Category) -> StockLevel:
        """Full stock level and valuation for one category."""
        result = await self._tally_category(category.id)
        return result.to_stock_level(category.id, category.name)

    @staticmethod
    def stock_levels(
        categories: Iterable[Category],
        purchases: Iterable[Purchase],
        sales: Iterable[Sale],
    ) -> list[StockLevel]:
        """
        Stock levels for many categories from one scan of each ledger.

        Categories keep their input order. Transactions whose category no
        longer exists are ignored.
        """
        tallies: dict[int, StockTally] = defaultdict(StockTally)
        for purchase in purchases:
            tallies[purchase.category_id].add_purchase(purchase)
        for sale in sales:
            tallies[sale.category_id].add_sale(sale)

        return [
            tallies.get(category.id, StockTally()).to_stock_level(
                category.id, category.name
            )
            for category in categories
        ]
