"""
Closure Calendar.

Answers "was the shop closed on day D, and how much of the day counts as
closed" for the analytics views.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from datetime import date

from shopledger.core.entities.reports import ClosureInfo, ClosureStats, DateRange
from shopledger.core.entities.shop_closure import ShopClosure
from shopledger.core.interfaces.ledger_store import IShopClosureStore, LedgerFilter

FULL_DAY_WEIGHT = 1.0
PARTIAL_DAY_WEIGHT = 0.5


def to_closure_info(closure: ShopClosure) -> ClosureInfo:
    return ClosureInfo(
        date=closure.date,
        reason=closure.reason,
        description=closure.description,
        is_full_day=closure.is_full_day,
        closed_hours=closure.closed_hours,
    )


class ClosureCalendar:
    """Lookup of closures keyed by calendar day."""

    def __init__(self, closures: Iterable[ShopClosure]) -> None:
        self._by_day: dict[str, ShopClosure] = {}
        for closure in closures:
            self._by_day[closure.date.isoformat()] = closure

    @classmethod
    async def load(
        cls, store: IShopClosureStore, start: date, end: date
    ) -> ClosureCalendar:
        """Read the closures with a date in ``[start, end]``."""
        closures = await store.list_closures(
            LedgerFilter(start_date=start, end_date=end)
        )
        return cls(closures)

    @property
    def closures(self) -> list[ShopClosure]:
        """Closures in ascending date order."""
        return [self._by_day[key] for key in sorted(self._by_day)]

    def __len__(self) -> int:
        return len(self._by_day)

    def is_closed(self, day: date) -> ClosureInfo | None:
        closure = self._by_day.get(day.isoformat())
        if closure is None:
            return None
        return to_closure_info(closure)

    def closed_weight(self, day: date) -> float:
        """1 for a full-day closure, 0.5 for any partial closure, else 0."""
        closure = self._by_day.get(day.isoformat())
        if closure is None:
            return 0.0
        return FULL_DAY_WEIGHT if closure.is_full_day else PARTIAL_DAY_WEIGHT

    def is_full_day_closed(self, day: date) -> bool:
        closure = self._by_day.get(day.isoformat())
        return closure is not None and closure.is_full_day

    def stats(self, start: date, end: date) -> ClosureStats:
        """Counts of closures in ``[start, end]`` broken down by reason."""
        in_range = [c for c in self.closures if start <= c.date <= end]
        full_days = sum(1 for c in in_range if c.is_full_day)
        by_reason = Counter(c.reason.value for c in in_range)

        return ClosureStats(
            total_closures=len(in_range),
            total_full_days=full_days,
            total_partial_days=len(in_range) - full_days,
            by_reason=dict(by_reason),
            date_range=DateRange(start=start, end=end),
        )
