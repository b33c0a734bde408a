"""Purchase and sale ledger entities."""

import datetime as dt

from pydantic import Field, model_validator

from shopledger.core.entities.base import LedgerModel


class Purchase(LedgerModel):
    """Stock bought from a supplier.

    ``category_name`` is a snapshot taken when the purchase is written, so a
    later rename of the category does not rewrite history.
    """

    id: int | None = None
    date: dt.date = Field(default_factory=dt.date.today)
    category_id: int
    category_name: str
    quantity: int = Field(..., ge=1)
    total_cost: float = Field(..., ge=0)
    cost_per_item: float = 0.0  # derived: total_cost / quantity
    selling_price_per_item: float = Field(..., ge=0)
    supplier: str = ""
    created_at: dt.datetime = Field(default_factory=dt.datetime.now)
    updated_at: dt.datetime = Field(default_factory=dt.datetime.now)

    @model_validator(mode="after")
    def compute_cost_per_item(self) -> "Purchase":
        """Derive cost_per_item from total_cost and quantity."""
        self.cost_per_item = self.total_cost / self.quantity
        return self


class Sale(LedgerModel):
    """Stock sold to a customer."""

    id: int | None = None
    date: dt.date = Field(default_factory=dt.date.today)
    category_id: int
    category_name: str
    quantity: int = Field(..., ge=1)
    selling_price_per_item: float = Field(..., ge=0)
    total_amount: float = 0.0  # derived: quantity * selling_price_per_item
    created_at: dt.datetime = Field(default_factory=dt.datetime.now)
    updated_at: dt.datetime = Field(default_factory=dt.datetime.now)

    @model_validator(mode="after")
    def compute_total_amount(self) -> "Sale":
        """Derive total_amount from quantity and selling price."""
        self.total_amount = self.quantity * self.selling_price_per_item
        return self
