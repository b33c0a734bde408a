"""Core analytics services."""

from shopledger.core.services.analytics_aggregator import AnalyticsAggregator
from shopledger.core.services.closure_calendar import ClosureCalendar
from shopledger.core.services.money import format2, round2, safe_div
from shopledger.core.services.stock_calculator import StockCalculator, StockTally
from shopledger.core.services.time_bucketing import TimeBucketingEngine, week_start

__all__ = [
    "AnalyticsAggregator",
    "ClosureCalendar",
    "StockCalculator",
    "StockTally",
    "TimeBucketingEngine",
    "week_start",
    "round2",
    "format2",
    "safe_div",
]
