"""SQLite storage implementations."""

from shopledger.infrastructure.storage.sqlite.category_store import SQLiteCategoryStore
from shopledger.infrastructure.storage.sqlite.closure_store import SQLiteShopClosureStore
from shopledger.infrastructure.storage.sqlite.connection import ConnectionPool
from shopledger.infrastructure.storage.sqlite.purchase_store import SQLitePurchaseStore
from shopledger.infrastructure.storage.sqlite.sale_store import SQLiteSaleStore

__all__ = [
    "ConnectionPool",
    "SQLiteCategoryStore",
    "SQLitePurchaseStore",
    "SQLiteSaleStore",
    "SQLiteShopClosureStore",
]
