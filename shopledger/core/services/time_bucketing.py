"""
Time-Bucketing Engine.

Groups sales into daily, weekly (Monday-start) and day-of-week buckets and
adjusts per-day averages for shop closures.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import date, timedelta

from shopledger.core.entities.reports import (
    ClosureInfo,
    DailyBucket,
    DailySalesReport,
    DailySummary,
    DateRange,
    DayHighlight,
    DayOfWeekBucket,
    DayOfWeekSalesReport,
    DayOfWeekSummary,
    WeeklyBucket,
    WeeklySalesReport,
    WeeklySummary,
)
from shopledger.core.entities.transaction import Sale
from shopledger.core.services.closure_calendar import ClosureCalendar, to_closure_info
from shopledger.core.services.money import format2, round2, safe_div

DAY_NAMES = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]

DAYS_PER_WEEK = 7


def day_name(day: date) -> str:
    """English weekday name, Sunday-first indexing."""
    return DAY_NAMES[(day.weekday() + 1) % DAYS_PER_WEEK]


def week_start(day: date) -> date:
    """Monday of the week containing ``day``; Sunday belongs to the prior week."""
    return day - timedelta(days=day.weekday())


def week_label(start: date) -> str:
    """Label such as ``Mar 11 - Mar 17``."""
    end = start + timedelta(days=DAYS_PER_WEEK - 1)
    return f"{start:%b} {start.day} - {end:%b} {end.day}"


def iter_days(start: date, end: date) -> Iterator[date]:
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)


@dataclass
class _Accumulator:
    revenue: float = 0.0
    quantity: int = 0
    count: int = 0

    def add(self, sale: Sale) -> None:
        self.revenue += sale.total_amount
        self.quantity += sale.quantity
        self.count += 1

    @property
    def average_per_transaction(self) -> float:
        return safe_div(self.revenue, self.count)


@dataclass
class _WeekAccumulator(_Accumulator):
    closed_days: float = 0.0
    closures: list[ClosureInfo] = field(default_factory=list)


class TimeBucketingEngine:
    """Pure bucketing over already-fetched sales and closures."""

    def daily(
        self,
        sales: Iterable[Sale],
        calendar: ClosureCalendar,
        start: date,
        end: date,
    ) -> DailySalesReport:
        """
        One bucket per calendar day in ``[start, end]``.

        Days without sales are synthesized with zero totals, so the result
        always holds ``end - start + 1`` buckets.
        """
        by_day: dict[date, _Accumulator] = {day: _Accumulator() for day in iter_days(start, end)}
        for sale in sales:
            acc = by_day.get(sale.date)
            if acc is not None:
                acc.add(sale)

        buckets: list[DailyBucket] = []
        total_revenue = 0.0
        total_transactions = 0
        closed_days = 0.0

        for day, acc in by_day.items():
            closure_info = calendar.is_closed(day)
            closed_days += calendar.closed_weight(day)
            total_revenue += acc.revenue
            total_transactions += acc.count
            buckets.append(
                DailyBucket(
                    date=day,
                    day_of_week=day_name(day),
                    total_revenue=round2(acc.revenue),
                    total_quantity=acc.quantity,
                    transaction_count=acc.count,
                    is_closed=closure_info is not None,
                    closure_info=closure_info,
                )
            )

        total_days = len(buckets)
        open_days = total_days - closed_days

        return DailySalesReport(
            data=buckets,
            summary=DailySummary(
                date_range=DateRange(start=start, end=end),
                total_days=total_days,
                total_revenue=round2(total_revenue),
                total_transactions=total_transactions,
                days_with_sales=sum(1 for b in buckets if b.transaction_count > 0),
                closed_days=closed_days,
                open_days=open_days,
                average_revenue_per_open_day=round2(
                    safe_div(total_revenue, open_days)
                ),
            ),
        )

    def weekly(
        self,
        sales: Iterable[Sale],
        calendar: ClosureCalendar,
        start: date,
        end: date,
    ) -> WeeklySalesReport:
        """
        Monday-start weekly buckets, ascending.

        A week appears only if it holds at least one sale or one closure.
        """
        weeks: dict[date, _WeekAccumulator] = {}

        for sale in sales:
            key = week_start(sale.date)
            weeks.setdefault(key, _WeekAccumulator()).add(sale)

        for closure in calendar.closures:
            key = week_start(closure.date)
            acc = weeks.setdefault(key, _WeekAccumulator())
            acc.closed_days += calendar.closed_weight(closure.date)
            acc.closures.append(to_closure_info(closure))

        buckets: list[WeeklyBucket] = []
        total_revenue = 0.0
        total_transactions = 0
        total_closed_days = 0.0

        for key in sorted(weeks):
            acc = weeks[key]
            open_days = DAYS_PER_WEEK - acc.closed_days
            total_revenue += acc.revenue
            total_transactions += acc.count
            total_closed_days += acc.closed_days
            buckets.append(
                WeeklyBucket(
                    week_start=key.isoformat(),
                    week_end=(key + timedelta(days=DAYS_PER_WEEK - 1)).isoformat(),
                    week_label=week_label(key),
                    total_revenue=format2(acc.revenue),
                    total_quantity=acc.quantity,
                    transaction_count=acc.count,
                    average_per_transaction=format2(acc.average_per_transaction),
                    closed_days=acc.closed_days,
                    open_days=open_days,
                    average_revenue_per_open_day=format2(
                        safe_div(acc.revenue, open_days)
                    ),
                    closures=acc.closures,
                )
            )

        return WeeklySalesReport(
            data=buckets,
            summary=WeeklySummary(
                date_range=DateRange(start=start, end=end),
                total_weeks=len(buckets),
                total_revenue=format2(total_revenue),
                total_transactions=total_transactions,
                average_weekly_revenue=format2(safe_div(total_revenue, len(buckets))),
                total_closed_days=total_closed_days,
            ),
        )

    def day_of_week(
        self,
        sales: Iterable[Sale],
        calendar: ClosureCalendar,
        start: date,
        end: date,
    ) -> DayOfWeekSalesReport:
        """
        Seven buckets, Sunday through Saturday.

        ``open_count`` only discounts full-day closures; a partial closure
        still counts the day as open.
        """
        accs = {name: _Accumulator() for name in DAY_NAMES}
        occurrences = dict.fromkeys(DAY_NAMES, 0)
        full_day_closures = dict.fromkeys(DAY_NAMES, 0)

        for sale in sales:
            accs[day_name(sale.date)].add(sale)

        for day in iter_days(start, end):
            name = day_name(day)
            occurrences[name] += 1
            if calendar.is_full_day_closed(day):
                full_day_closures[name] += 1

        buckets: list[DayOfWeekBucket] = []
        for name in DAY_NAMES:
            acc = accs[name]
            open_count = occurrences[name] - full_day_closures[name]
            buckets.append(
                DayOfWeekBucket(
                    day_name=name,
                    total_revenue=format2(acc.revenue),
                    total_quantity=acc.quantity,
                    transaction_count=acc.count,
                    average_per_transaction=format2(acc.average_per_transaction),
                    total_occurrences=occurrences[name],
                    full_day_closures=full_day_closures[name],
                    open_count=open_count,
                    average_revenue_per_open_day=format2(
                        safe_div(acc.revenue, open_count)
                    ),
                )
            )

        # sorted() is stable, so ties keep Sunday..Saturday order.
        ranked = sorted(DAY_NAMES, key=lambda n: accs[n].revenue, reverse=True)
        best = ranked[0]
        worst = next(
            (n for n in reversed(ranked) if accs[n].revenue > 0),
            ranked[-1],
        )

        return DayOfWeekSalesReport(
            data=buckets,
            summary=DayOfWeekSummary(
                date_range=DateRange(start=start, end=end),
                total_revenue=format2(sum(a.revenue for a in accs.values())),
                total_transactions=sum(a.count for a in accs.values()),
                best_day=DayHighlight(name=best, revenue=format2(accs[best].revenue)),
                worst_day=DayHighlight(
                    name=worst, revenue=format2(accs[worst].revenue)
                ),
            ),
        )
