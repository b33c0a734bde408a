"""Tests for RecordPurchaseUseCase."""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from shopledger.application.dto.requests import (
    CreatePurchaseRequest,
    UpdatePurchaseRequest,
)
from shopledger.application.use_cases.record_purchase import RecordPurchaseUseCase
from shopledger.core.exceptions import CategoryNotFoundError, PurchaseNotFoundError
from shopledger.core.interfaces import LedgerFilter


@pytest.fixture
def purchase_store():
    store = AsyncMock()
    store.create.side_effect = lambda purchase: purchase.model_copy(update={"id": 3})
    store.update.side_effect = lambda purchase: purchase
    return store


@pytest.fixture
def category_store(category_factory):
    store = AsyncMock()
    store.get.return_value = category_factory(id=1, name="Rice")
    return store


@pytest.fixture
def use_case(purchase_store, category_store):
    return RecordPurchaseUseCase(purchase_store, category_store)


class TestCreatePurchase:
    async def test_derives_cost_per_item_and_snapshots_name(self, use_case):
        purchase = await use_case.create(
            CreatePurchaseRequest(
                date="2024-03-11T08:30:00Z",
                category_id=1,
                quantity=100,
                total_cost=5000,
                selling_price_per_item=60,
            )
        )

        assert purchase.id == 3
        assert purchase.date == date(2024, 3, 11)
        assert purchase.cost_per_item == 50.0
        assert purchase.category_name == "Rice"

    async def test_unknown_category(self, use_case, category_store, purchase_store):
        category_store.get.return_value = None

        with pytest.raises(CategoryNotFoundError):
            await use_case.create(
                CreatePurchaseRequest(
                    category_id=7, quantity=1, total_cost=1, selling_price_per_item=1
                )
            )
        purchase_store.create.assert_not_awaited()


class TestUpdatePurchase:
    async def test_cost_per_item_follows_new_totals(
        self, use_case, purchase_store, purchase_factory
    ):
        purchase_store.get.return_value = purchase_factory(quantity=100, total_cost=5000)

        purchase = await use_case.update(1, UpdatePurchaseRequest(total_cost=6000))

        assert purchase.quantity == 100
        assert purchase.cost_per_item == 60.0

    async def test_same_category_keeps_snapshot(
        self, use_case, purchase_store, category_store, purchase_factory
    ):
        purchase_store.get.return_value = purchase_factory(category_name="Old rice")

        purchase = await use_case.update(1, UpdatePurchaseRequest(category_id=1))

        assert purchase.category_name == "Old rice"
        category_store.get.assert_not_awaited()

    async def test_missing_purchase(self, use_case, purchase_store):
        purchase_store.get.return_value = None
        with pytest.raises(PurchaseNotFoundError):
            await use_case.update(1, UpdatePurchaseRequest(quantity=2))


class TestListAndDelete:
    async def test_list_passes_filter(self, use_case, purchase_store):
        purchase_store.list_purchases.return_value = []
        ledger_filter = LedgerFilter(category_id=1, start_date=date(2024, 3, 1))

        await use_case.list_purchases(ledger_filter)

        purchase_store.list_purchases.assert_awaited_once_with(ledger_filter)

    async def test_delete_missing(self, use_case, purchase_store):
        purchase_store.delete.return_value = False
        with pytest.raises(PurchaseNotFoundError):
            await use_case.delete(99)
