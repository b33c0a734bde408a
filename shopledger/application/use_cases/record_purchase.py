"""Record Purchase Use Case - append and edit purchase ledger entries."""

from shopledger.application.dto.requests import (
    CreatePurchaseRequest,
    UpdatePurchaseRequest,
)
from shopledger.config import get_logger
from shopledger.core.entities.transaction import Purchase
from shopledger.core.exceptions import CategoryNotFoundError, PurchaseNotFoundError
from shopledger.core.interfaces.ledger_store import (
    ICategoryStore,
    IPurchaseStore,
    LedgerFilter,
)

logger = get_logger(__name__)


class RecordPurchaseUseCase:
    """Purchases against an existing category; cost_per_item is always re-derived."""

    def __init__(
        self,
        purchase_store: IPurchaseStore,
        category_store: ICategoryStore,
    ):
        self._purchase_store = purchase_store
        self._category_store = category_store

    async def _category_name(self, category_id: int) -> str:
        category = await self._category_store.get(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category.name

    async def list_purchases(self, ledger_filter: LedgerFilter | None = None) -> list[Purchase]:
        return await self._purchase_store.list_purchases(ledger_filter)

    async def get(self, purchase_id: int) -> Purchase:
        purchase = await self._purchase_store.get(purchase_id)
        if purchase is None:
            raise PurchaseNotFoundError(purchase_id)
        return purchase

    async def create(self, request: CreatePurchaseRequest) -> Purchase:
        current_name = await self._category_name(request.category_id)
        data = request.model_dump(exclude_none=True)
        data.setdefault("category_name", current_name)

        purchase = await self._purchase_store.create(Purchase.model_validate(data))
        logger.info(
            "purchase_recorded",
            purchase_id=purchase.id,
            category_id=purchase.category_id,
            cost_per_item=purchase.cost_per_item,
        )
        return purchase

    async def update(self, purchase_id: int, request: UpdatePurchaseRequest) -> Purchase:
        existing = await self.get(purchase_id)
        changes = request.model_dump(exclude_unset=True, exclude_none=True)

        new_category = changes.get("category_id")
        if new_category is not None and new_category != existing.category_id:
            current_name = await self._category_name(new_category)
            changes.setdefault("category_name", current_name)

        # Re-validate so cost_per_item follows the new totals
        purchase = Purchase.model_validate({**existing.model_dump(), **changes})
        return await self._purchase_store.update(purchase)

    async def delete(self, purchase_id: int) -> int:
        if not await self._purchase_store.delete(purchase_id):
            raise PurchaseNotFoundError(purchase_id)
        return purchase_id
