"""Manage Shop Closures Use Case - one closure per calendar day."""

from datetime import date

from shopledger.application.dto.requests import (
    CreateShopClosureRequest,
    UpdateShopClosureRequest,
)
from shopledger.config import get_logger
from shopledger.core.entities.shop_closure import ShopClosure
from shopledger.core.exceptions import (
    DuplicateClosureError,
    InvalidDateRangeError,
    ShopClosureNotFoundError,
)
from shopledger.core.interfaces.ledger_store import IShopClosureStore, LedgerFilter

logger = get_logger(__name__)


class ManageShopClosuresUseCase:
    """CRUD for shop closures with per-day uniqueness."""

    def __init__(self, closure_store: IShopClosureStore):
        self._store = closure_store

    async def list_closures(
        self, start: date | None = None, end: date | None = None
    ) -> list[ShopClosure]:
        if start is not None and end is not None and start > end:
            raise InvalidDateRangeError(start, end)
        return await self._store.list_closures(
            LedgerFilter(start_date=start, end_date=end)
        )

    async def get(self, closure_id: int) -> ShopClosure:
        closure = await self._store.get(closure_id)
        if closure is None:
            raise ShopClosureNotFoundError(closure_id)
        return closure

    async def create(self, request: CreateShopClosureRequest) -> ShopClosure:
        if await self._store.get_by_date(request.date) is not None:
            raise DuplicateClosureError(request.date)
        return await self._store.create(ShopClosure.model_validate(request.model_dump()))

    async def update(
        self, closure_id: int, request: UpdateShopClosureRequest
    ) -> ShopClosure:
        existing = await self.get(closure_id)
        changes = request.model_dump(exclude_unset=True, exclude_none=True)

        new_date = changes.get("date")
        if new_date is not None and new_date != existing.date:
            clash = await self._store.get_by_date(new_date)
            if clash is not None and clash.id != closure_id:
                raise DuplicateClosureError(new_date)

        closure = ShopClosure.model_validate({**existing.model_dump(), **changes})
        return await self._store.update(closure)

    async def delete(self, closure_id: int) -> int:
        if not await self._store.delete(closure_id):
            raise ShopClosureNotFoundError(closure_id)
        logger.debug("shop_closure_removed", closure_id=closure_id)
        return closure_id
