"""Sale ledger and sales analytics endpoints."""

from fastapi import APIRouter, Depends, Query, status

from shopledger.api.dependencies import (
    DateRangeParams,
    get_analytics,
    get_sale_use_case,
)
from shopledger.application.dto.requests import CreateSaleRequest, UpdateSaleRequest
from shopledger.application.dto.responses import DeletedResponse, ErrorResponse
from shopledger.application.use_cases import RecordSaleUseCase
from shopledger.core.entities import (
    DailySalesReport,
    DayOfWeekSalesReport,
    Sale,
    WeeklySalesReport,
)
from shopledger.core.interfaces import LedgerFilter
from shopledger.core.services import AnalyticsAggregator

router = APIRouter(prefix="/api/sales", tags=["sales"])


@router.get("", response_model=list[Sale])
async def list_sales(
    category_id: int | None = Query(default=None, alias="categoryId"),
    dates: DateRangeParams = Depends(),
    use_case: RecordSaleUseCase = Depends(get_sale_use_case),
) -> list[Sale]:
    """List sales, newest first, optionally by category and date range."""
    return await use_case.list_sales(
        LedgerFilter(category_id=category_id, start_date=dates.start, end_date=dates.end)
    )


# Analytics routes are declared before /{sale_id} so they are matched first


@router.get(
    "/analytics/weekly",
    response_model=WeeklySalesReport,
    responses={400: {"model": ErrorResponse}},
)
async def weekly_sales(
    dates: DateRangeParams = Depends(),
    analytics: AnalyticsAggregator = Depends(get_analytics),
) -> WeeklySalesReport:
    """Monday-start weekly revenue with closure-adjusted averages. Defaults to 8 weeks."""
    return await analytics.weekly_report(dates.start, dates.end)


@router.get(
    "/analytics/day-of-week",
    response_model=DayOfWeekSalesReport,
    responses={400: {"model": ErrorResponse}},
)
async def day_of_week_sales(
    dates: DateRangeParams = Depends(),
    analytics: AnalyticsAggregator = Depends(get_analytics),
) -> DayOfWeekSalesReport:
    """Revenue per weekday, Sunday to Saturday, with best and worst day. Defaults to 2 weeks."""
    return await analytics.day_of_week_report(dates.start, dates.end)


@router.get(
    "/analytics/daily",
    response_model=DailySalesReport,
    responses={400: {"model": ErrorResponse}},
)
async def daily_sales(
    dates: DateRangeParams = Depends(),
    analytics: AnalyticsAggregator = Depends(get_analytics),
) -> DailySalesReport:
    """One bucket per calendar day, including days without sales. Defaults to 30 days."""
    return await analytics.daily_report(dates.start, dates.end)


@router.get(
    "/{sale_id}",
    response_model=Sale,
    responses={404: {"model": ErrorResponse}},
)
async def get_sale(
    sale_id: int,
    use_case: RecordSaleUseCase = Depends(get_sale_use_case),
) -> Sale:
    return await use_case.get(sale_id)


@router.post(
    "",
    response_model=Sale,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def create_sale(
    request: CreateSaleRequest,
    use_case: RecordSaleUseCase = Depends(get_sale_use_case),
) -> Sale:
    """Record a sale. Rejected with INSUFFICIENT_STOCK when quantity exceeds stock on hand."""
    return await use_case.create(request)


@router.put(
    "/{sale_id}",
    response_model=Sale,
    responses={404: {"model": ErrorResponse}},
)
async def update_sale(
    sale_id: int,
    request: UpdateSaleRequest,
    use_case: RecordSaleUseCase = Depends(get_sale_use_case),
) -> Sale:
    """Edit a sale. Stock is not re-checked on update."""
    return await use_case.update(sale_id, request)


@router.delete(
    "/{sale_id}",
    response_model=DeletedResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_sale(
    sale_id: int,
    use_case: RecordSaleUseCase = Depends(get_sale_use_case),
) -> DeletedResponse:
    deleted_id = await use_case.delete(sale_id)
    return DeletedResponse(message="Sale deleted successfully", id=deleted_id)
