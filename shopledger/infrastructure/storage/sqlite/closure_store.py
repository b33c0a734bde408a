"""SQLite implementation of shop closure storage."""

import sqlite3
from datetime import date, datetime

import aiosqlite

from shopledger.config import get_logger
from shopledger.core.entities.shop_closure import ClosureReason, ShopClosure
from shopledger.core.exceptions import DuplicateClosureError
from shopledger.core.interfaces.ledger_store import IShopClosureStore, LedgerFilter
from shopledger.infrastructure.storage.sqlite.base import SQLiteStore

logger = get_logger(__name__)


class SQLiteShopClosureStore(SQLiteStore, IShopClosureStore):
    """SQLite implementation of shop closure storage."""

    async def create(self, closure: ShopClosure) -> ShopClosure:
        now = datetime.now()
        closure.created_at = now
        closure.updated_at = now
        async with self._pool.transaction("create_shop_closure") as conn:
            try:
                cursor = await conn.execute(
                    """
                    INSERT INTO shop_closures (
                        date, reason, description, is_full_day, closed_hours,
                        created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        closure.date.isoformat(),
                        closure.reason.value,
                        closure.description,
                        int(closure.is_full_day),
                        closure.closed_hours,
                        closure.created_at.isoformat(),
                        closure.updated_at.isoformat(),
                    ),
                )
            except sqlite3.IntegrityError as e:
                raise DuplicateClosureError(closure.date) from e
            closure.id = cursor.lastrowid
        logger.info(
            "shop_closure_created",
            closure_id=closure.id,
            date=closure.date.isoformat(),
            reason=closure.reason.value,
        )
        return closure

    async def get(self, closure_id: int) -> ShopClosure | None:
        async with self._pool.acquire("get_shop_closure") as conn:
            cursor = await conn.execute(
                "SELECT * FROM shop_closures WHERE id = ?", (closure_id,)
            )
            row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_closure(row)

    async def get_by_date(self, day: date) -> ShopClosure | None:
        async with self._pool.acquire("get_shop_closure_by_date") as conn:
            cursor = await conn.execute(
                "SELECT * FROM shop_closures WHERE date = ?", (day.isoformat(),)
            )
            row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_closure(row)

    async def list_closures(
        self, filter: LedgerFilter | None = None
    ) -> list[ShopClosure]:
        # Closures carry no category; only the date bounds apply
        if filter is not None:
            filter = LedgerFilter(start_date=filter.start_date, end_date=filter.end_date)
        where, params = self._filter_clause(filter)
        async with self._pool.acquire("list_shop_closures") as conn:
            cursor = await conn.execute(
                f"SELECT * FROM shop_closures {where} ORDER BY date DESC, id DESC",
                params,
            )
            rows = await cursor.fetchall()
        return [self._row_to_closure(row) for row in rows]

    async def update(self, closure: ShopClosure) -> ShopClosure:
        closure.updated_at = datetime.now()
        async with self._pool.transaction("update_shop_closure") as conn:
            try:
                await conn.execute(
                    """
                    UPDATE shop_closures SET
                        date = ?,
                        reason = ?,
                        description = ?,
                        is_full_day = ?,
                        closed_hours = ?,
                        updated_at = ?
                    WHERE id = ?
                    """,
                    (
                        closure.date.isoformat(),
                        closure.reason.value,
                        closure.description,
                        int(closure.is_full_day),
                        closure.closed_hours,
                        closure.updated_at.isoformat(),
                        closure.id,
                    ),
                )
            except sqlite3.IntegrityError as e:
                raise DuplicateClosureError(closure.date) from e
        logger.info("shop_closure_updated", closure_id=closure.id)
        return closure

    async def delete(self, closure_id: int) -> bool:
        async with self._pool.transaction("delete_shop_closure") as conn:
            cursor = await conn.execute(
                "DELETE FROM shop_closures WHERE id = ?", (closure_id,)
            )
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info("shop_closure_deleted", closure_id=closure_id)
        return deleted

    @classmethod
    def _row_to_closure(cls, row: aiosqlite.Row) -> ShopClosure:
        return ShopClosure(
            id=row["id"],
            date=cls._parse_date(row["date"]),
            reason=ClosureReason(row["reason"]),
            description=row["description"] or "",
            is_full_day=bool(row["is_full_day"]),
            closed_hours=float(row["closed_hours"] or 0),
            created_at=cls._parse_datetime(row["created_at"]),
            updated_at=cls._parse_datetime(row["updated_at"]),
        )
