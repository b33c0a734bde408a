"""Category management endpoints."""

from fastapi import APIRouter, Depends, status

from shopledger.api.dependencies import get_categories_use_case
from shopledger.application.dto.requests import (
    CreateCategoryRequest,
    UpdateCategoryRequest,
)
from shopledger.application.dto.responses import DeletedResponse, ErrorResponse
from shopledger.application.use_cases import ManageCategoriesUseCase
from shopledger.core.entities import Category

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=list[Category])
async def list_categories(
    use_case: ManageCategoriesUseCase = Depends(get_categories_use_case),
) -> list[Category]:
    """List categories, newest first."""
    return await use_case.list_categories()


@router.get(
    "/{category_id}",
    response_model=Category,
    responses={404: {"model": ErrorResponse}},
)
async def get_category(
    category_id: int,
    use_case: ManageCategoriesUseCase = Depends(get_categories_use_case),
) -> Category:
    return await use_case.get(category_id)


@router.post(
    "",
    response_model=Category,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_category(
    request: CreateCategoryRequest,
    use_case: ManageCategoriesUseCase = Depends(get_categories_use_case),
) -> Category:
    """Create a category. Names are trimmed and must be unique."""
    return await use_case.create(request)


@router.put(
    "/{category_id}",
    response_model=Category,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_category(
    category_id: int,
    request: UpdateCategoryRequest,
    use_case: ManageCategoriesUseCase = Depends(get_categories_use_case),
) -> Category:
    """Rename a category. Past transactions keep the name they were recorded with."""
    return await use_case.update(category_id, request)


@router.delete(
    "/{category_id}",
    response_model=DeletedResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_category(
    category_id: int,
    use_case: ManageCategoriesUseCase = Depends(get_categories_use_case),
) -> DeletedResponse:
    """Delete a category. Its purchases and sales are kept."""
    deleted_id = await use_case.delete(category_id)
    return DeletedResponse(message="Category deleted successfully", id=deleted_id)
