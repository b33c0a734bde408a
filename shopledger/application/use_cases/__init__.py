"""Application use cases."""

from shopledger.application.use_cases.manage_categories import ManageCategoriesUseCase
from shopledger.application.use_cases.manage_shop_closures import (
    ManageShopClosuresUseCase,
)
from shopledger.application.use_cases.record_purchase import RecordPurchaseUseCase
from shopledger.application.use_cases.record_sale import RecordSaleUseCase

__all__ = [
    "ManageCategoriesUseCase",
    "RecordPurchaseUseCase",
    "RecordSaleUseCase",
    "ManageShopClosuresUseCase",
]
