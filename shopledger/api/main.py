"""
FastAPI application factory.

Creates and configures the main application instance.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shopledger.api.middleware import ErrorHandlerMiddleware, LoggingMiddleware
from shopledger.api.middleware.error_handler import setup_exception_handlers
from shopledger.api.routes import (
    categories_router,
    dashboard_router,
    health_router,
    inventory_router,
    purchases_router,
    sales_router,
    shop_closures_router,
)
from shopledger.application.dto.responses import ApiInfoResponse, HealthResponse
from shopledger.config import configure_logging, get_logger, get_settings
from shopledger.infrastructure.storage.sqlite import ConnectionPool
from shopledger.infrastructure.storage.sqlite.migrations import run_migrations

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan handler.

    Migrates the database and opens the connection pool on startup, closes
    the pool on shutdown.
    """
    settings = get_settings()
    configure_logging()

    logger.info(
        "application_starting",
        host=settings.api.host,
        port=settings.api.port,
        debug=settings.api.debug,
    )

    try:
        await run_migrations(settings.storage.db_path)
        logger.info("database_initialized")

        pool = ConnectionPool.from_settings(settings.storage)
        await pool.initialize()
        app.state.pool = pool
        logger.info("connection_pool_ready")

    except Exception as e:
        logger.error("database_init_failed", error=str(e))
        raise

    logger.info("application_started")

    yield

    logger.info("application_stopping")
    await app.state.pool.close()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Purchase and sale ledger with inventory and sales analytics",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc" if settings.api.debug else None,
        lifespan=lifespan,
    )

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)

    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    setup_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(categories_router)
    app.include_router(purchases_router)
    app.include_router(sales_router)
    app.include_router(inventory_router)
    app.include_router(dashboard_router)
    app.include_router(shop_closures_router)

    @app.get("/", response_model=ApiInfoResponse)
    async def root() -> ApiInfoResponse:
        """API info."""
        return ApiInfoResponse(name=settings.app_name, version=settings.app_version)

    # Root health endpoint (for docker health checks), no store round trip
    @app.get("/health", response_model=HealthResponse)
    async def root_health() -> HealthResponse:
        return HealthResponse(status="OK")

    return app


app = create_app()


def main() -> None:
    """Run the API server."""
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "shopledger.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.debug,
    )


if __name__ == "__main__":
    main()
