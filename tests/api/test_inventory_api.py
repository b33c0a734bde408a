"""Tests for the inventory and dashboard endpoints."""

from datetime import date


class TestInventoryApi:
    async def test_inventory(
        self, async_client, stores, category_factory, purchase_factory, sale_factory
    ):
        stores.category.list_categories.return_value = [category_factory(id=1, name="Rice")]
        stores.purchase.list_purchases.return_value = [
            purchase_factory(quantity=100, total_cost=5000, selling_price_per_item=60)
        ]
        stores.sale.list_sales.return_value = [sale_factory(quantity=30)]

        response = await async_client.get("/api/inventory")

        assert response.status_code == 200
        body = response.json()
        rice = body["inventory"][0]
        assert rice["category"] == "Rice"
        assert rice["remaining"] == 70
        assert rice["avgCostPerItem"] == 50.0
        assert rice["costValue"] == 3500.0
        assert body["summary"]["totalStockValue"] == 3500.0
        assert body["summary"]["totalPotentialValue"] == 4200.0

    async def test_category_inventory(
        self, async_client, stores, category_factory, purchase_factory
    ):
        stores.category.get.return_value = category_factory(id=1, name="Rice")
        stores.purchase.list_purchases.return_value = [purchase_factory(quantity=10)]

        response = await async_client.get("/api/inventory/1")

        assert response.status_code == 200
        body = response.json()
        assert body["remaining"] == 10
        assert len(body["purchases"]) == 1
        assert body["sales"] == []

    async def test_category_inventory_missing(self, async_client, stores):
        stores.category.get.return_value = None

        response = await async_client.get("/api/inventory/42")

        assert response.status_code == 404


class TestDashboardApi:
    async def test_dashboard(
        self, async_client, stores, category_factory, purchase_factory, sale_factory
    ):
        today = date.today()
        stores.category.list_categories.return_value = [category_factory(id=1, name="Rice")]
        stores.purchase.list_purchases.return_value = [
            purchase_factory(quantity=10, total_cost=500, day=today)
        ]
        stores.sale.list_sales.return_value = [
            sale_factory(quantity=4, selling_price_per_item=250, day=today)
        ]

        response = await async_client.get("/api/dashboard")

        assert response.status_code == 200
        body = response.json()
        assert body["summary"]["totalRevenue"] == 1000.0
        assert body["summary"]["profit"] == 500.0
        assert body["summary"]["profitMargin"] == 50.0
        assert body["topCategories"][0]["category"] == "Rice"
        assert body["lowStockItems"] == [{"categoryId": 1, "category": "Rice", "remaining": 6}]
        assert body["monthlySales"][0]["revenue"] == 1000.0
        assert len(body["recentSales"]) == 1
