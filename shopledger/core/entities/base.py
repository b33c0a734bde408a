"""Shared model configuration for ledger entities."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LedgerModel(BaseModel):
    """Snake_case in Python, camelCase on the wire; either accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
