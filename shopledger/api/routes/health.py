"""
Health check endpoints.
"""

from fastapi import APIRouter, Depends

from shopledger.api.dependencies import get_pool
from shopledger.application.dto.responses import HealthResponse
from shopledger.infrastructure.storage.sqlite import ConnectionPool

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(pool: ConnectionPool = Depends(get_pool)) -> HealthResponse:
    """
    Service health including a round trip to the ledger store.

    A store failure surfaces as a 500 through the error handler.
    """
    async with pool.acquire("health_check") as conn:
        await conn.execute("SELECT 1")
    return HealthResponse(status="OK")
