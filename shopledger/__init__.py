"""Shop Ledger - point-of-sale back-office API."""

__version__ = "1.0.0"
