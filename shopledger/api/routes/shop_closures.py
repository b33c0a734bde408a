"""Shop closure endpoints."""

from fastapi import APIRouter, Depends, status

from shopledger.api.dependencies import (
    DateRangeParams,
    get_analytics,
    get_closures_use_case,
)
from shopledger.application.dto.requests import (
    CreateShopClosureRequest,
    UpdateShopClosureRequest,
)
from shopledger.application.dto.responses import DeletedResponse, ErrorResponse
from shopledger.application.use_cases import ManageShopClosuresUseCase
from shopledger.core.entities import ClosureStatsReport, ShopClosure
from shopledger.core.services import AnalyticsAggregator

router = APIRouter(prefix="/api/shop-closures", tags=["shop-closures"])


@router.get(
    "",
    response_model=list[ShopClosure],
    responses={400: {"model": ErrorResponse}},
)
async def list_closures(
    dates: DateRangeParams = Depends(),
    use_case: ManageShopClosuresUseCase = Depends(get_closures_use_case),
) -> list[ShopClosure]:
    """List closures, newest first, optionally within a date range."""
    return await use_case.list_closures(dates.start, dates.end)


@router.get(
    "/stats",
    response_model=ClosureStatsReport,
    responses={400: {"model": ErrorResponse}},
)
async def closure_stats(
    dates: DateRangeParams = Depends(),
    analytics: AnalyticsAggregator = Depends(get_analytics),
) -> ClosureStatsReport:
    """Closure counts by type and reason. Defaults to the last 90 days."""
    return await analytics.closure_stats(dates.start, dates.end)


@router.get(
    "/{closure_id}",
    response_model=ShopClosure,
    responses={404: {"model": ErrorResponse}},
)
async def get_closure(
    closure_id: int,
    use_case: ManageShopClosuresUseCase = Depends(get_closures_use_case),
) -> ShopClosure:
    return await use_case.get(closure_id)


@router.post(
    "",
    response_model=ShopClosure,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_closure(
    request: CreateShopClosureRequest,
    use_case: ManageShopClosuresUseCase = Depends(get_closures_use_case),
) -> ShopClosure:
    """Mark a day closed. Only one closure per calendar day is allowed."""
    return await use_case.create(request)


@router.put(
    "/{closure_id}",
    response_model=ShopClosure,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_closure(
    closure_id: int,
    request: UpdateShopClosureRequest,
    use_case: ManageShopClosuresUseCase = Depends(get_closures_use_case),
) -> ShopClosure:
    return await use_case.update(closure_id, request)


@router.delete(
    "/{closure_id}",
    response_model=DeletedResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_closure(
    closure_id: int,
    use_case: ManageShopClosuresUseCase = Depends(get_closures_use_case),
) -> DeletedResponse:
    deleted_id = await use_case.delete(closure_id)
    return DeletedResponse(message="Shop closure deleted successfully", id=deleted_id)
