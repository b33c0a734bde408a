"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest

from shopledger.infrastructure.storage.sqlite import (
    ConnectionPool,
    SQLiteCategoryStore,
    SQLitePurchaseStore,
    SQLiteSaleStore,
    SQLiteShopClosureStore,
)
from shopledger.infrastructure.storage.sqlite.migrations.migrator import (
    initialize_database,
)


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
async def initialized_db(temp_db_path: Path) -> Path:
    """Create a temporary database with the full ledger schema."""
    await initialize_database(temp_db_path, create_backup_before=False)
    return temp_db_path


@pytest.fixture
async def pool(initialized_db: Path) -> AsyncGenerator[ConnectionPool, None]:
    pool = ConnectionPool(initialized_db, pool_size=2, busy_timeout=5000)
    await pool.initialize()
    yield pool
    await pool.close()


@pytest.fixture
def category_store(pool: ConnectionPool) -> SQLiteCategoryStore:
    return SQLiteCategoryStore(pool)


@pytest.fixture
def purchase_store(pool: ConnectionPool) -> SQLitePurchaseStore:
    return SQLitePurchaseStore(pool)


@pytest.fixture
def sale_store(pool: ConnectionPool) -> SQLiteSaleStore:
    return SQLiteSaleStore(pool)


@pytest.fixture
def closure_store(pool: ConnectionPool) -> SQLiteShopClosureStore:
    return SQLiteShopClosureStore(pool)
