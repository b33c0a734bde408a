"""Record Sale Use Case - sale creation with stock guard."""

from shopledger.application.dto.requests import CreateSaleRequest, UpdateSaleRequest
from shopledger.config import get_logger
from shopledger.core.entities.transaction import Sale
from shopledger.core.exceptions import (
    CategoryNotFoundError,
    InsufficientStockError,
    SaleNotFoundError,
)
from shopledger.core.interfaces.ledger_store import (
    ICategoryStore,
    IPurchaseStore,
    ISaleStore,
    LedgerFilter,
)
from shopledger.core.services.stock_calculator import StockCalculator

logger = get_logger(__name__)


class RecordSaleUseCase:
    """
    Record sales, refusing to sell more than the ledger says is on hand.

    The guard reads stock and then writes without a lock, so two
    concurrent creates can both pass and oversell. Updates do not re-run
    the guard.
    """

    def __init__(
        self,
        sale_store: ISaleStore,
        purchase_store: IPurchaseStore,
        category_store: ICategoryStore,
    ):
        self._sale_store = sale_store
        self._category_store = category_store
        self._stock = StockCalculator(purchase_store, sale_store)

    async def _category_name(self, category_id: int) -> str:
        category = await self._category_store.get(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category.name

    async def list_sales(self, ledger_filter: LedgerFilter | None = None) -> list[Sale]:
        return await self._sale_store.list_sales(ledger_filter)

    async def get(self, sale_id: int) -> Sale:
        sale = await self._sale_store.get(sale_id)
        if sale is None:
            raise SaleNotFoundError(sale_id)
        return sale

    async def create(self, request: CreateSaleRequest) -> Sale:
        """Execute the guarded sale creation."""
        current_name = await self._category_name(request.category_id)

        available = await self._stock.available_stock(request.category_id)
        if request.quantity > available:
            logger.warning(
                "insufficient_stock",
                category_id=request.category_id,
                requested=request.quantity,
                available=available,
            )
            raise InsufficientStockError(
                category_id=request.category_id,
                requested=request.quantity,
                available=available,
            )

        data = request.model_dump(exclude_none=True)
        data.setdefault("category_name", current_name)

        sale = await self._sale_store.create(Sale.model_validate(data))
        logger.info(
            "sale_recorded",
            sale_id=sale.id,
            category_id=sale.category_id,
            remaining=available - sale.quantity,
        )
        return sale

    async def update(self, sale_id: int, request: UpdateSaleRequest) -> Sale:
        """Apply changes and re-derive total_amount. Stock is not re-checked."""
        existing = await self.get(sale_id)
        changes = request.model_dump(exclude_unset=True, exclude_none=True)

        new_category = changes.get("category_id")
        if new_category is not None and new_category != existing.category_id:
            current_name = await self._category_name(new_category)
            changes.setdefault("category_name", current_name)

        sale = Sale.model_validate({**existing.model_dump(), **changes})
        return await self._sale_store.update(sale)

    async def delete(self, sale_id: int) -> int:
        if not await self._sale_store.delete(sale_id):
            raise SaleNotFoundError(sale_id)
        return sale_id
