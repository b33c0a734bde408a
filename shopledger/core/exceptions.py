"""
Domain exceptions for the shop ledger.

Every error carries an ``ErrorKind`` so the transport layer can map it to a
status code without knowing the concrete class.
"""

from datetime import date
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Error categories surfaced to API callers."""

    NOT_FOUND = "NotFound"
    VALIDATION = "ValidationError"
    INSUFFICIENT_STOCK = "InsufficientStock"
    UPSTREAM_STORE = "UpstreamStoreError"


class LedgerError(Exception):
    """Base exception for all ledger errors."""

    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}


# Not Found
class NotFoundError(LedgerError):
    """Referenced entity id does not resolve."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity: str, entity_id: int, code: str | None = None):
        super().__init__(
            f"{entity} not found: {entity_id}",
            code=code or "NOT_FOUND",
            details={"entity": entity, "id": entity_id},
        )


class CategoryNotFoundError(NotFoundError):
    def __init__(self, category_id: int):
        super().__init__("Category", category_id, code="CATEGORY_NOT_FOUND")


class PurchaseNotFoundError(NotFoundError):
    def __init__(self, purchase_id: int):
        super().__init__("Purchase", purchase_id, code="PURCHASE_NOT_FOUND")


class SaleNotFoundError(NotFoundError):
    def __init__(self, sale_id: int):
        super().__init__("Sale", sale_id, code="SALE_NOT_FOUND")


class ShopClosureNotFoundError(NotFoundError):
    def __init__(self, closure_id: int):
        super().__init__("Shop closure", closure_id, code="SHOP_CLOSURE_NOT_FOUND")


# Validation
class ValidationError(LedgerError):
    """Input validation failed."""

    kind = ErrorKind.VALIDATION

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class DuplicateCategoryError(ValidationError):
    """A category with the same name already exists."""

    def __init__(self, name: str):
        super().__init__(field="name", message="Category already exists", value=name)
        self.code = "DUPLICATE_CATEGORY"


class DuplicateClosureError(ValidationError):
    """The shop is already marked closed on that calendar day."""

    def __init__(self, day: date):
        super().__init__(
            field="date",
            message="Shop closure already exists for this date",
            value=day.isoformat(),
        )
        self.code = "DUPLICATE_CLOSURE"


class InvalidDateRangeError(ValidationError):
    def __init__(self, start: date, end: date):
        super().__init__(
            field="startDate",
            message=f"startDate {start.isoformat()} is after endDate {end.isoformat()}",
            value=start.isoformat(),
        )
        self.code = "INVALID_DATE_RANGE"


# Stock
class InsufficientStockError(LedgerError):
    """Sale quantity exceeds what the ledger says is on hand."""

    kind = ErrorKind.INSUFFICIENT_STOCK

    def __init__(self, category_id: int, requested: int, available: int):
        super().__init__(
            f"Insufficient stock. Only {available} items available",
            code="INSUFFICIENT_STOCK",
            details={
                "category_id": category_id,
                "requested": requested,
                "available_stock": available,
            },
        )
        self.available = available


# Storage
class StorageError(LedgerError):
    """Base exception for ledger store failures."""

    kind = ErrorKind.UPSTREAM_STORE


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )
