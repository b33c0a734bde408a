"""Tests for the sale endpoints and sales analytics."""

from datetime import date

import pytest

from shopledger.core.exceptions import DatabaseError
from shopledger.core.interfaces import LedgerFilter


@pytest.fixture
def rice_in_stock(stores, category_factory, purchase_factory, sale_factory):
    """Rice: 10 bought, 3 sold."""
    stores.category.get.return_value = category_factory(id=1, name="Rice")
    stores.purchase.list_purchases.return_value = [purchase_factory(quantity=10)]
    stores.sale.list_sales.return_value = [sale_factory(quantity=3)]
    stores.sale.create.side_effect = lambda s: s.model_copy(update={"id": 21})


class TestSaleLedgerApi:
    @pytest.mark.usefixtures("rice_in_stock")
    async def test_insufficient_stock(self, async_client, stores):
        response = await async_client.post(
            "/api/sales",
            json={"categoryId": 1, "quantity": 8, "sellingPricePerItem": 60},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "INSUFFICIENT_STOCK"
        assert body["message"] == "Insufficient stock. Only 7 items available"
        assert body["details"]["available_stock"] == 7
        stores.sale.create.assert_not_awaited()

    @pytest.mark.usefixtures("rice_in_stock")
    async def test_create(self, async_client):
        response = await async_client.post(
            "/api/sales",
            json={
                "date": "2024-03-13",
                "categoryId": 1,
                "quantity": 7,
                "sellingPricePerItem": 60,
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 21
        assert body["totalAmount"] == 420.0
        assert body["categoryName"] == "Rice"

    async def test_update_skips_stock_check(self, async_client, stores, sale_factory):
        stores.sale.get.return_value = sale_factory(id=5, quantity=1)
        stores.sale.update.side_effect = lambda s: s

        response = await async_client.put("/api/sales/5", json={"quantity": 500})

        assert response.status_code == 200
        assert response.json()["totalAmount"] == 30000.0
        stores.purchase.list_purchases.assert_not_awaited()

    async def test_list_with_filters(self, async_client, stores):
        response = await async_client.get(
            "/api/sales", params={"categoryId": 1, "startDate": "2024-03-01"}
        )

        assert response.status_code == 200
        stores.sale.list_sales.assert_awaited_once_with(
            LedgerFilter(category_id=1, start_date=date(2024, 3, 1))
        )

    async def test_bad_date_param(self, async_client, stores):
        response = await async_client.get("/api/sales", params={"startDate": "March"})

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    async def test_get_missing(self, async_client, stores):
        stores.sale.get.return_value = None

        response = await async_client.get("/api/sales/3")

        assert response.status_code == 404
        assert response.json()["error_code"] == "SALE_NOT_FOUND"


class TestSalesAnalyticsApi:
    async def test_weekly(self, async_client, stores, sale_factory, closure_factory):
        stores.sale.list_sales.return_value = [
            sale_factory(id=1, day=date(2024, 3, 13), quantity=1, selling_price_per_item=100),
            sale_factory(id=2, day=date(2024, 3, 17), quantity=1, selling_price_per_item=100),
        ]
        stores.closure.list_closures.return_value = [
            closure_factory(date(2024, 3, 12), is_full_day=False)
        ]

        response = await async_client.get(
            "/api/sales/analytics/weekly",
            params={"startDate": "2024-03-01", "endDate": "2024-03-31"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        week = body["data"][0]
        assert week["weekStart"] == "2024-03-11"
        assert week["weekLabel"] == "Mar 11 - Mar 17"
        assert week["totalRevenue"] == "200.00"
        assert week["closedDays"] == 0.5
        assert week["openDays"] == 6.5
        assert week["closures"][0]["reason"] == "Holiday"
        assert body["summary"]["totalWeeks"] == 1

    async def test_daily_fills_empty_days(self, async_client, stores):
        response = await async_client.get(
            "/api/sales/analytics/daily",
            params={"startDate": "2024-01-01", "endDate": "2024-01-03"},
        )

        assert response.status_code == 200
        body = response.json()
        assert [d["date"] for d in body["data"]] == ["2024-01-01", "2024-01-02", "2024-01-03"]
        assert all(d["totalRevenue"] == 0 for d in body["data"])
        assert body["summary"]["totalDays"] == 3

    async def test_day_of_week(self, async_client, stores, sale_factory):
        stores.sale.list_sales.return_value = [
            sale_factory(day=date(2024, 3, 13), quantity=2, selling_price_per_item=50)
        ]

        response = await async_client.get(
            "/api/sales/analytics/day-of-week",
            params={"startDate": "2024-03-11", "endDate": "2024-03-24"},
        )

        assert response.status_code == 200
        body = response.json()
        assert [d["dayName"] for d in body["data"]][0] == "Sunday"
        assert body["summary"]["bestDay"] == {"name": "Wednesday", "revenue": "100.00"}
        assert body["summary"]["worstDay"]["name"] == "Wednesday"

    async def test_inverted_range(self, async_client, stores):
        response = await async_client.get(
            "/api/sales/analytics/weekly",
            params={"startDate": "2024-04-01", "endDate": "2024-03-01"},
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_DATE_RANGE"

    async def test_store_failure_is_500(self, async_client, stores):
        stores.sale.list_sales.side_effect = DatabaseError("list_sales", "disk I/O error")

        response = await async_client.get("/api/sales/analytics/daily")

        assert response.status_code == 500
        assert response.json()["error_code"] == "DATABASE_ERROR"
