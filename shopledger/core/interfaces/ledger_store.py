"""Abstract interfaces for ledger storage.

The analytics engine only talks to these ports; any store failure is
expected to surface as a ``StorageError``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date

from shopledger.core.entities.category import Category
from shopledger.core.entities.shop_closure import ShopClosure
from shopledger.core.entities.transaction import Purchase, Sale


@dataclass(frozen=True)
class LedgerFilter:
    """Equality filter on category and inclusive date range."""

    category_id: int | None = None
    start_date: date | None = None
    end_date: date | None = None


class ICategoryStore(ABC):
    """Interface for category persistence."""

    @abstractmethod
    async def create(self, category: Category) -> Category:
        """Create a new category."""
        pass

    @abstractmethod
    async def get(self, category_id: int) -> Category | None:
        """Get category by ID."""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Category | None:
        """Get category by exact name."""
        pass

    @abstractmethod
    async def list_categories(self) -> list[Category]:
        """List categories, newest first."""
        pass

    @abstractmethod
    async def update(self, category: Category) -> Category:
        """Update category."""
        pass

    @abstractmethod
    async def delete(self, category_id: int) -> bool:
        """Delete category. Purchases and sales are left untouched."""
        pass


class IPurchaseStore(ABC):
    """Interface for purchase ledger persistence."""

    @abstractmethod
    async def create(self, purchase: Purchase) -> Purchase:
        """Append a purchase."""
        pass

    @abstractmethod
    async def get(self, purchase_id: int) -> Purchase | None:
        """Get purchase by ID."""
        pass

    @abstractmethod
    async def list_purchases(self, filter: LedgerFilter | None = None) -> list[Purchase]:
        """List purchases matching the filter, ordered by date DESC."""
        pass

    @abstractmethod
    async def update(self, purchase: Purchase) -> Purchase:
        """Update purchase."""
        pass

    @abstractmethod
    async def delete(self, purchase_id: int) -> bool:
        """Delete purchase."""
        pass


class ISaleStore(ABC):
    """Interface for sale ledger persistence."""

    @abstractmethod
    async def create(self, sale: Sale) -> Sale:
        """Append a sale."""
        pass

    @abstractmethod
    async def get(self, sale_id: int) -> Sale | None:
        """Get sale by ID."""
        pass

    @abstractmethod
    async def list_sales(self, filter: LedgerFilter | None = None) -> list[Sale]:
        """List sales matching the filter, ordered by date DESC."""
        pass

    @abstractmethod
    async def update(self, sale: Sale) -> Sale:
        """Update sale."""
        pass

    @abstractmethod
    async def delete(self, sale_id: int) -> bool:
        """Delete sale."""
        pass


class IShopClosureStore(ABC):
    """Interface for shop closure persistence."""

    @abstractmethod
    async def create(self, closure: ShopClosure) -> ShopClosure:
        """Create a closure."""
        pass

    @abstractmethod
    async def get(self, closure_id: int) -> ShopClosure | None:
        """Get closure by ID."""
        pass

    @abstractmethod
    async def get_by_date(self, day: date) -> ShopClosure | None:
        """Get the closure recorded for a calendar day."""
        pass

    @abstractmethod
    async def list_closures(
        self, filter: LedgerFilter | None = None
    ) -> list[ShopClosure]:
        """List closures in the date range, ordered by date DESC."""
        pass

    @abstractmethod
    async def update(self, closure: ShopClosure) -> ShopClosure:
        """Update closure."""
        pass

    @abstractmethod
    async def delete(self, closure_id: int) -> bool:
        """Delete closure."""
        pass
