"""Dashboard endpoint."""

from fastapi import APIRouter, Depends

from shopledger.api.dependencies import get_analytics
from shopledger.core.entities import DashboardReport
from shopledger.core.services import AnalyticsAggregator

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardReport)
async def get_dashboard(
    analytics: AnalyticsAggregator = Depends(get_analytics),
) -> DashboardReport:
    """
    Headline business figures.

    Totals, profit and margin, top categories by revenue, recent
    transactions, six-month trends and low-stock alerts.
    """
    return await analytics.dashboard()
