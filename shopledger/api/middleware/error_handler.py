"""
Error handling middleware.

Standardizes all API error responses to include:
- error_code: machine-readable identifier
- message: human-readable description
- hint: suggested recovery action
"""

import traceback
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from shopledger.application.dto.responses import ErrorResponse
from shopledger.config import get_logger
from shopledger.core.exceptions import ErrorKind, LedgerError

logger = get_logger(__name__)


# Map error kinds to HTTP status codes
KIND_STATUS_MAP: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INSUFFICIENT_STOCK: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UPSTREAM_STORE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Hint messages per error code / exception type
HINT_MAP: dict[str, str] = {
    "CATEGORY_NOT_FOUND": "Check the category ID and try GET /api/categories to list categories.",
    "PURCHASE_NOT_FOUND": "Check the purchase ID and try GET /api/purchases to list purchases.",
    "SALE_NOT_FOUND": "Check the sale ID and try GET /api/sales to list sales.",
    "SHOP_CLOSURE_NOT_FOUND": "Check the closure ID and try GET /api/shop-closures to list closures.",
    "DUPLICATE_CATEGORY": "A category with this name already exists. Pick another name.",
    "DUPLICATE_CLOSURE": "The shop is already marked closed on that date. Update that closure instead.",
    "INVALID_DATE_RANGE": "startDate must be on or before endDate.",
    "INSUFFICIENT_STOCK": "Record a purchase for this category or lower the quantity.",
    "VALIDATION_ERROR": "Check the request body against the API schema.",
    "DATABASE_ERROR": "A database operation failed. Check server logs.",
}

# Default hints by HTTP status code
STATUS_HINTS: dict[int, str] = {
    400: "Check the request parameters and body.",
    404: "The requested resource was not found. Verify the ID.",
    422: "The request could not be processed. Check the input format.",
    500: "An internal error occurred. Check server logs.",
}


def _get_hint(error_code: str, status_code: int) -> str:
    """Resolve hint from error code, falling back to status-based hint."""
    return HINT_MAP.get(error_code) or STATUS_HINTS.get(status_code, "")


def status_for(exc: LedgerError) -> int:
    return KIND_STATUS_MAP.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware.

    Converts exceptions that escaped the route handlers to standardized
    JSON error responses.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Handle request with error catching."""
        try:
            return await call_next(request)

        except Exception as e:
            return self._handle_exception(request, e)

    def _handle_exception(
        self,
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Convert exception to standardized JSON response."""
        if isinstance(exc, LedgerError):
            status_code = status_for(exc)
            error_code = exc.code
            details = exc.details or None
        else:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
            error_code = exc.__class__.__name__
            details = None

        request_id = getattr(request.state, "request_id", None)

        logger.error(
            "unhandled_exception",
            request_id=request_id,
            path=request.url.path,
            error_type=error_code,
            error=str(exc),
            traceback=traceback.format_exc() if status_code >= 500 else None,
        )

        error_response = ErrorResponse(
            error_code=error_code,
            message=str(exc),
            hint=_get_hint(error_code, status_code),
            details=details,
            path=request.url.path,
        )

        return JSONResponse(
            status_code=status_code,
            content=error_response.model_dump(mode="json"),
        )


def setup_exception_handlers(app: FastAPI) -> None:
    """Set up FastAPI exception handlers."""
    from fastapi.exceptions import RequestValidationError
    from starlette.exceptions import HTTPException

    @app.exception_handler(LedgerError)
    async def ledger_exception_handler(
        request: Request,
        exc: LedgerError,
    ) -> JSONResponse:
        """Translate domain errors by kind."""
        status_code = status_for(exc)
        log = logger.error if status_code >= 500 else logger.info
        log(
            "ledger_error",
            request_id=getattr(request.state, "request_id", None),
            path=request.url.path,
            kind=exc.kind.value,
            error_code=exc.code,
            error=exc.message,
        )

        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error_code=exc.code,
                message=exc.message,
                hint=_get_hint(exc.code, status_code),
                details=exc.details or None,
                path=request.url.path,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle Pydantic validation errors."""
        errors = []
        for error in exc.errors():
            loc = " -> ".join(str(part) for part in error["loc"])
            errors.append(f"{loc}: {error['msg']}")

        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error_code="VALIDATION_ERROR",
                message="Request validation failed",
                hint="Check the request body fields and types.",
                details={"errors": errors},
                path=request.url.path,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request,
        exc: HTTPException,
    ) -> JSONResponse:
        """Handle HTTP exceptions with standardized format."""
        error_code = _infer_error_code(exc.status_code)
        message = exc.detail if isinstance(exc.detail, str) else "An error occurred"

        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error_code=error_code,
                message=message,
                hint=_get_hint(error_code, exc.status_code),
                path=request.url.path,
            ).model_dump(mode="json"),
        )


def _infer_error_code(status_code: int) -> str:
    """Infer a machine-readable error code from an HTTP status."""
    if status_code == 404:
        return "NOT_FOUND"
    if status_code == 405:
        return "METHOD_NOT_ALLOWED"
    if status_code == 400:
        return "BAD_REQUEST"
    return "HTTP_ERROR"
