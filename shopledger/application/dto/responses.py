"""Response DTOs for API endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from shopledger.core.entities.base import LedgerModel


class DeletedResponse(LedgerModel):
    """Acknowledgement returned by DELETE endpoints."""

    message: str
    id: int


class HealthResponse(LedgerModel):
    """Health check response."""

    status: str
    timestamp: datetime = Field(default_factory=datetime.now)


class ApiInfoResponse(LedgerModel):
    """Payload of the root endpoint."""

    name: str
    version: str
    docs: str = "/docs"
    health: str = "/health"


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. CATEGORY_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    details: dict[str, Any] | None = Field(default=None, description="Structured context")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
