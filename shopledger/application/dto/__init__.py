"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses that are not
already report entities.
"""

from shopledger.application.dto.requests import (
    CreateCategoryRequest,
    CreatePurchaseRequest,
    CreateSaleRequest,
    CreateShopClosureRequest,
    UpdateCategoryRequest,
    UpdatePurchaseRequest,
    UpdateSaleRequest,
    UpdateShopClosureRequest,
    parse_day,
)
from shopledger.application.dto.responses import (
    ApiInfoResponse,
    DeletedResponse,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    # Requests
    "CreateCategoryRequest",
    "UpdateCategoryRequest",
    "CreatePurchaseRequest",
    "UpdatePurchaseRequest",
    "CreateSaleRequest",
    "UpdateSaleRequest",
    "CreateShopClosureRequest",
    "UpdateShopClosureRequest",
    "parse_day",
    # Responses
    "ApiInfoResponse",
    "DeletedResponse",
    "ErrorResponse",
    "HealthResponse",
]
