"""Tests for the SQLite ledger stores against a migrated database."""

from datetime import date

import pytest

from shopledger.core.entities import Category, ClosureReason
from shopledger.core.exceptions import DuplicateCategoryError, DuplicateClosureError
from shopledger.core.interfaces import LedgerFilter


class TestCategoryStore:
    async def test_create_and_get(self, category_store):
        created = await category_store.create(Category(name="Rice"))

        assert created.id is not None
        fetched = await category_store.get(created.id)
        assert fetched.name == "Rice"
        assert (await category_store.get_by_name("Rice")).id == created.id

    async def test_get_missing(self, category_store):
        assert await category_store.get(999) is None
        assert await category_store.get_by_name("nope") is None

    async def test_list_newest_first(self, category_store):
        first = await category_store.create(Category(name="Rice"))
        second = await category_store.create(Category(name="Oil"))

        listed = await category_store.list_categories()

        assert [c.id for c in listed] == [second.id, first.id]

    async def test_unique_name_enforced_by_schema(self, category_store):
        await category_store.create(Category(name="Rice"))

        with pytest.raises(DuplicateCategoryError) as exc_info:
            await category_store.create(Category(name="Rice"))

        assert exc_info.value.code == "DUPLICATE_CATEGORY"
        assert len(await category_store.list_categories()) == 1

    async def test_rename_onto_existing_name(self, category_store):
        await category_store.create(Category(name="Rice"))
        oil = await category_store.create(Category(name="Oil"))
        oil.name = "Rice"

        with pytest.raises(DuplicateCategoryError):
            await category_store.update(oil)

        assert (await category_store.get(oil.id)).name == "Oil"

    async def test_update_and_delete(self, category_store):
        category = await category_store.create(Category(name="Rice"))
        category.name = "Basmati"

        await category_store.update(category)

        assert (await category_store.get(category.id)).name == "Basmati"
        assert await category_store.delete(category.id) is True
        assert await category_store.delete(category.id) is False


class TestPurchaseStore:
    async def test_round_trip_keeps_derived_cost(self, purchase_store, purchase_factory):
        created = await purchase_store.create(
            purchase_factory(id=None, quantity=100, total_cost=5000, day=date(2024, 3, 11))
        )

        fetched = await purchase_store.get(created.id)

        assert fetched.date == date(2024, 3, 11)
        assert fetched.cost_per_item == 50.0
        assert fetched.category_name == "Rice"

    async def test_filter_by_category_and_dates(self, purchase_store, purchase_factory):
        await purchase_store.create(purchase_factory(id=None, category_id=1, day=date(2024, 3, 1)))
        await purchase_store.create(purchase_factory(id=None, category_id=1, day=date(2024, 3, 15)))
        await purchase_store.create(purchase_factory(id=None, category_id=2, day=date(2024, 3, 15)))

        by_category = await purchase_store.list_purchases(LedgerFilter(category_id=1))
        in_range = await purchase_store.list_purchases(
            LedgerFilter(start_date=date(2024, 3, 15), end_date=date(2024, 3, 15))
        )

        assert len(by_category) == 2
        assert [p.date for p in by_category] == [date(2024, 3, 15), date(2024, 3, 1)]
        assert len(in_range) == 2

    async def test_update_and_delete(self, purchase_store, purchase_factory):
        purchase = await purchase_store.create(purchase_factory(id=None))
        updated = purchase.model_copy(update={"supplier": "Wholesale Ltd"})

        await purchase_store.update(updated)

        assert (await purchase_store.get(purchase.id)).supplier == "Wholesale Ltd"
        assert await purchase_store.delete(purchase.id) is True
        assert await purchase_store.get(purchase.id) is None


class TestSaleStore:
    async def test_total_amount_recomputed_on_read(self, sale_store, sale_factory):
        created = await sale_store.create(
            sale_factory(id=None, quantity=30, selling_price_per_item=60)
        )

        fetched = await sale_store.get(created.id)

        assert fetched.total_amount == 1800.0

    async def test_list_newest_date_first(self, sale_store, sale_factory):
        await sale_store.create(sale_factory(id=None, day=date(2024, 3, 1)))
        await sale_store.create(sale_factory(id=None, day=date(2024, 3, 20)))
        await sale_store.create(sale_factory(id=None, day=date(2024, 3, 10)))

        sales = await sale_store.list_sales()

        assert [s.date for s in sales] == [
            date(2024, 3, 20),
            date(2024, 3, 10),
            date(2024, 3, 1),
        ]

    async def test_date_range_is_inclusive(self, sale_store, sale_factory):
        for day in (1, 2, 3, 4):
            await sale_store.create(sale_factory(id=None, day=date(2024, 3, day)))

        sales = await sale_store.list_sales(
            LedgerFilter(start_date=date(2024, 3, 2), end_date=date(2024, 3, 3))
        )

        assert sorted(s.date.day for s in sales) == [2, 3]


class TestShopClosureStore:
    async def test_create_and_get_by_date(self, closure_store, closure_factory):
        created = await closure_store.create(
            closure_factory(
                date(2024, 3, 15),
                is_full_day=False,
                reason=ClosureReason.SICK_LEAVE,
                closed_hours=3,
            )
        )

        fetched = await closure_store.get_by_date(date(2024, 3, 15))

        assert fetched.id == created.id
        assert fetched.reason is ClosureReason.SICK_LEAVE
        assert fetched.is_full_day is False
        assert fetched.closed_hours == 3.0

    async def test_one_closure_per_day_enforced_by_schema(
        self, closure_store, closure_factory
    ):
        await closure_store.create(closure_factory(date(2024, 3, 15)))

        with pytest.raises(DuplicateClosureError) as exc_info:
            await closure_store.create(closure_factory(date(2024, 3, 15)))

        assert exc_info.value.code == "DUPLICATE_CLOSURE"

    async def test_move_onto_closed_day(self, closure_store, closure_factory):
        await closure_store.create(closure_factory(date(2024, 3, 15)))
        other = await closure_store.create(closure_factory(date(2024, 3, 16)))
        other.date = date(2024, 3, 15)

        with pytest.raises(DuplicateClosureError):
            await closure_store.update(other)

        assert (await closure_store.get(other.id)).date == date(2024, 3, 16)

    async def test_list_ignores_category_filter(self, closure_store, closure_factory):
        await closure_store.create(closure_factory(date(2024, 3, 15)))
        await closure_store.create(closure_factory(date(2024, 4, 15)))

        closures = await closure_store.list_closures(
            LedgerFilter(
                category_id=1, start_date=date(2024, 3, 1), end_date=date(2024, 3, 31)
            )
        )

        assert [c.date for c in closures] == [date(2024, 3, 15)]

    async def test_delete(self, closure_store, closure_factory):
        closure = await closure_store.create(closure_factory(date(2024, 3, 15)))
        assert await closure_store.delete(closure.id) is True
        assert await closure_store.get(closure.id) is None
