"""Purchase ledger endpoints."""

from fastapi import APIRouter, Depends, Query, status

from shopledger.api.dependencies import DateRangeParams, get_purchase_use_case
from shopledger.application.dto.requests import (
    CreatePurchaseRequest,
    UpdatePurchaseRequest,
)
from shopledger.application.dto.responses import DeletedResponse, ErrorResponse
from shopledger.application.use_cases import RecordPurchaseUseCase
from shopledger.core.entities import Purchase
from shopledger.core.interfaces import LedgerFilter

router = APIRouter(prefix="/api/purchases", tags=["purchases"])


@router.get("", response_model=list[Purchase])
async def list_purchases(
    category_id: int | None = Query(default=None, alias="categoryId"),
    dates: DateRangeParams = Depends(),
    use_case: RecordPurchaseUseCase = Depends(get_purchase_use_case),
) -> list[Purchase]:
    """List purchases, newest first, optionally by category and date range."""
    return await use_case.list_purchases(
        LedgerFilter(category_id=category_id, start_date=dates.start, end_date=dates.end)
    )


@router.get(
    "/{purchase_id}",
    response_model=Purchase,
    responses={404: {"model": ErrorResponse}},
)
async def get_purchase(
    purchase_id: int,
    use_case: RecordPurchaseUseCase = Depends(get_purchase_use_case),
) -> Purchase:
    return await use_case.get(purchase_id)


@router.post(
    "",
    response_model=Purchase,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}},
)
async def create_purchase(
    request: CreatePurchaseRequest,
    use_case: RecordPurchaseUseCase = Depends(get_purchase_use_case),
) -> Purchase:
    """Record a purchase; costPerItem is derived from totalCost / quantity."""
    return await use_case.create(request)


@router.put(
    "/{purchase_id}",
    response_model=Purchase,
    responses={404: {"model": ErrorResponse}},
)
async def update_purchase(
    purchase_id: int,
    request: UpdatePurchaseRequest,
    use_case: RecordPurchaseUseCase = Depends(get_purchase_use_case),
) -> Purchase:
    return await use_case.update(purchase_id, request)


@router.delete(
    "/{purchase_id}",
    response_model=DeletedResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_purchase(
    purchase_id: int,
    use_case: RecordPurchaseUseCase = Depends(get_purchase_use_case),
) -> DeletedResponse:
    deleted_id = await use_case.delete(purchase_id)
    return DeletedResponse(message="Purchase deleted successfully", id=deleted_id)
