"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation. Bodies accept camelCase or
snake_case keys.
"""

import datetime as dt
from typing import Any

from pydantic import Field, field_validator

from shopledger.core.entities.base import LedgerModel
from shopledger.core.entities.shop_closure import ClosureReason


def parse_day(value: Any) -> Any:
    """Coerce a date, datetime or ISO string to a calendar day.

    ``2024-03-13T10:15:00Z`` becomes ``2024-03-13``. Anything else is
    returned unchanged for pydantic to reject.
    """
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str) and len(value) >= 10:
        try:
            return dt.date.fromisoformat(value[:10])
        except ValueError:
            return value
    return value


class _DayRequest(LedgerModel):
    @field_validator("date", mode="before", check_fields=False)
    @classmethod
    def truncate_to_day(cls, v: Any) -> Any:
        return parse_day(v)


# --- Categories ---


class CreateCategoryRequest(LedgerModel):
    """Request to create a category."""

    name: str = Field(..., max_length=100, examples=["Rice"])


class UpdateCategoryRequest(LedgerModel):
    """Request to rename a category."""

    name: str = Field(..., max_length=100, examples=["Basmati Rice"])


# --- Purchases ---


class CreatePurchaseRequest(_DayRequest):
    """Request to record a purchase.

    ``category_name`` is optional; the current category name is copied
    when it is omitted.
    """

    date: dt.date | None = Field(default=None, examples=["2024-03-13"])
    category_id: int
    category_name: str | None = None
    quantity: int = Field(..., ge=1, examples=[100])
    total_cost: float = Field(..., ge=0, examples=[5000])
    selling_price_per_item: float = Field(..., ge=0, examples=[60])
    supplier: str = Field(default="", max_length=200)


class UpdatePurchaseRequest(_DayRequest):
    """Partial update of a purchase; omitted fields keep their value."""

    date: dt.date | None = None
    category_id: int | None = None
    category_name: str | None = None
    quantity: int | None = Field(default=None, ge=1)
    total_cost: float | None = Field(default=None, ge=0)
    selling_price_per_item: float | None = Field(default=None, ge=0)
    supplier: str | None = Field(default=None, max_length=200)


# --- Sales ---


class CreateSaleRequest(_DayRequest):
    """Request to record a sale."""

    date: dt.date | None = Field(default=None, examples=["2024-03-13"])
    category_id: int
    category_name: str | None = None
    quantity: int = Field(..., ge=1, examples=[30])
    selling_price_per_item: float = Field(..., ge=0, examples=[60])


class UpdateSaleRequest(_DayRequest):
    """Partial update of a sale; omitted fields keep their value."""

    date: dt.date | None = None
    category_id: int | None = None
    category_name: str | None = None
    quantity: int | None = Field(default=None, ge=1)
    selling_price_per_item: float | None = Field(default=None, ge=0)


# --- Shop closures ---


class CreateShopClosureRequest(_DayRequest):
    """Request to mark a day (or part of one) as closed."""

    date: dt.date = Field(..., examples=["2024-03-15"])
    reason: ClosureReason = Field(..., examples=["Holiday"])
    description: str = Field(default="", max_length=200)
    is_full_day: bool = True
    closed_hours: float = Field(default=0.0, ge=0, le=24)


class UpdateShopClosureRequest(_DayRequest):
    """Partial update of a closure; omitted fields keep their value."""

    date: dt.date | None = None
    reason: ClosureReason | None = None
    description: str | None = Field(default=None, max_length=200)
    is_full_day: bool | None = None
    closed_hours: float | None = Field(default=None, ge=0, le=24)
