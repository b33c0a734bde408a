"""Inventory endpoints - stock levels derived from the ledgers."""

from fastapi import APIRouter, Depends

from shopledger.api.dependencies import get_analytics
from shopledger.application.dto.responses import ErrorResponse
from shopledger.core.entities import CategoryInventoryReport, InventoryReport
from shopledger.core.services import AnalyticsAggregator

router = APIRouter(prefix="/api/inventory", tags=["inventory"])


@router.get("", response_model=InventoryReport)
async def get_inventory(
    analytics: AnalyticsAggregator = Depends(get_analytics),
) -> InventoryReport:
    """Stock level and valuation for every category."""
    return await analytics.inventory()


@router.get(
    "/{category_id}",
    response_model=CategoryInventoryReport,
    responses={404: {"model": ErrorResponse}},
)
async def get_category_inventory(
    category_id: int,
    analytics: AnalyticsAggregator = Depends(get_analytics),
) -> CategoryInventoryReport:
    """Stock level of one category with its purchases and sales."""
    return await analytics.category_inventory(category_id)
