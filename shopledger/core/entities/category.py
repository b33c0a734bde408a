"""Category domain entity."""

from datetime import datetime

from pydantic import Field

from shopledger.core.entities.base import LedgerModel


class Category(LedgerModel):
    """A product category that purchases and sales are recorded against."""

    id: int | None = None
    name: str
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
