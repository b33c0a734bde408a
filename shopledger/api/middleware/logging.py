"""
Request logging middleware.

Binds the request id and the ledger resource being addressed
(``/api/sales/5`` -> resource ``sales``, record_id ``5``) to the structlog
context, so use case and store events inherit them.
"""

import time
import uuid
from collections.abc import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from shopledger.config import get_logger
from shopledger.config.logging import bind_ledger_context, clear_ledger_context

logger = get_logger(__name__)

API_PREFIX = "/api/"


def parse_ledger_path(path: str) -> tuple[str | None, int | None]:
    """Split an API path into its resource name and numeric record id."""
    if not path.startswith(API_PREFIX):
        return None, None
    parts = [p for p in path[len(API_PREFIX):].split("/") if p]
    if not parts:
        return None, None
    record_id = int(parts[1]) if len(parts) > 1 and parts[1].isdigit() else None
    return parts[0], record_id


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log each request once on completion (or failure) with its timing."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = uuid.uuid4().hex[:8]
        request.state.request_id = request_id
        resource, record_id = parse_ledger_path(request.url.path)
        bind_ledger_context(request_id=request_id, resource=resource, record_id=record_id)

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "request_failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            raise
        else:
            duration_ms = (time.perf_counter() - start) * 1000
            log = logger.warning if response.status_code >= 500 else logger.info
            log(
                "request_completed",
                method=request.method,
                path=request.url.path,
                status=response.status_code,
                duration_ms=round(duration_ms, 2),
            )
            response.headers["X-Request-ID"] = request_id
            response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"
            return response
        finally:
            clear_ledger_context()
