"""Shared plumbing for the SQLite ledger stores."""

from datetime import date, datetime

from shopledger.core.interfaces.ledger_store import LedgerFilter
from shopledger.infrastructure.storage.sqlite.connection import ConnectionPool


class SQLiteStore:
    """Base class holding the injected connection pool."""

    def __init__(self, pool: ConnectionPool):
        self._pool = pool

    @staticmethod
    def _parse_date(value: str | None) -> date:
        if not value:
            return date.today()
        # Tolerate rows written with a time component
        return date.fromisoformat(value[:10])

    @staticmethod
    def _parse_datetime(value: str | None) -> datetime:
        if not value:
            return datetime.now()
        return datetime.fromisoformat(value)

    @staticmethod
    def _filter_clause(
        ledger_filter: LedgerFilter | None,
        date_column: str = "date",
    ) -> tuple[str, list]:
        """Build a WHERE clause for a LedgerFilter."""
        if ledger_filter is None:
            return "", []

        conditions: list[str] = []
        params: list = []
        if ledger_filter.category_id is not None:
            conditions.append("category_id = ?")
            params.append(ledger_filter.category_id)
        if ledger_filter.start_date is not None:
            conditions.append(f"{date_column} >= ?")
            params.append(ledger_filter.start_date.isoformat())
        if ledger_filter.end_date is not None:
            conditions.append(f"{date_column} <= ?")
            params.append(ledger_filter.end_date.isoformat())

        if not conditions:
            return "", []
        return "WHERE " + " AND ".join(conditions), params
