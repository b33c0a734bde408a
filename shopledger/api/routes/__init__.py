"""API route modules."""

from shopledger.api.routes.categories import router as categories_router
from shopledger.api.routes.dashboard import router as dashboard_router
from shopledger.api.routes.health import router as health_router
from shopledger.api.routes.inventory import router as inventory_router
from shopledger.api.routes.purchases import router as purchases_router
from shopledger.api.routes.sales import router as sales_router
from shopledger.api.routes.shop_closures import router as shop_closures_router

__all__ = [
    "health_router",
    "categories_router",
    "purchases_router",
    "sales_router",
    "inventory_router",
    "dashboard_router",
    "shop_closures_router",
]
