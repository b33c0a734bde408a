"""Core interfaces (ports) for dependency injection."""

from shopledger.core.interfaces.ledger_store import (
    ICategoryStore,
    IPurchaseStore,
    ISaleStore,
    IShopClosureStore,
    LedgerFilter,
)

__all__ = [
    "LedgerFilter",
    "ICategoryStore",
    "IPurchaseStore",
    "ISaleStore",
    "IShopClosureStore",
]
