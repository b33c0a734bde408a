"""SQLite implementation of the purchase ledger."""

from datetime import datetime

import aiosqlite

from shopledger.config import get_logger
from shopledger.core.entities.transaction import Purchase
from shopledger.core.interfaces.ledger_store import IPurchaseStore, LedgerFilter
from shopledger.infrastructure.storage.sqlite.base import SQLiteStore

logger = get_logger(__name__)


class SQLitePurchaseStore(SQLiteStore, IPurchaseStore):
    """SQLite implementation of purchase storage."""

    async def create(self, purchase: Purchase) -> Purchase:
        now = datetime.now()
        purchase.created_at = now
        purchase.updated_at = now
        async with self._pool.transaction("create_purchase") as conn:
            cursor = await conn.execute(
                """
                INSERT INTO purchases (
                    date, category_id, category_name, quantity, total_cost,
                    cost_per_item, selling_price_per_item, supplier,
                    created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    purchase.date.isoformat(),
                    purchase.category_id,
                    purchase.category_name,
                    purchase.quantity,
                    purchase.total_cost,
                    purchase.cost_per_item,
                    purchase.selling_price_per_item,
                    purchase.supplier,
                    purchase.created_at.isoformat(),
                    purchase.updated_at.isoformat(),
                ),
            )
            purchase.id = cursor.lastrowid
        logger.info(
            "purchase_created",
            purchase_id=purchase.id,
            category_id=purchase.category_id,
            qty=purchase.quantity,
        )
        return purchase

    async def get(self, purchase_id: int) -> Purchase | None:
        async with self._pool.acquire("get_purchase") as conn:
            cursor = await conn.execute(
                "SELECT * FROM purchases WHERE id = ?", (purchase_id,)
            )
            row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_purchase(row)

    async def list_purchases(self, filter: LedgerFilter | None = None) -> list[Purchase]:
        where, params = self._filter_clause(filter)
        async with self._pool.acquire("list_purchases") as conn:
            cursor = await conn.execute(
                f"SELECT * FROM purchases {where} ORDER BY date DESC, id DESC",
                params,
            )
            rows = await cursor.fetchall()
        return [self._row_to_purchase(row) for row in rows]

    async def update(self, purchase: Purchase) -> Purchase:
        purchase.updated_at = datetime.now()
        async with self._pool.transaction("update_purchase") as conn:
            await conn.execute(
                """
                UPDATE purchases SET
                    date = ?,
                    category_id = ?,
                    category_name = ?,
                    quantity = ?,
                    total_cost = ?,
                    cost_per_item = ?,
                    selling_price_per_item = ?,
                    supplier = ?,
                    updated_at = ?
                WHERE id = ?
                """,
                (
                    purchase.date.isoformat(),
                    purchase.category_id,
                    purchase.category_name,
                    purchase.quantity,
                    purchase.total_cost,
                    purchase.cost_per_item,
                    purchase.selling_price_per_item,
                    purchase.supplier,
                    purchase.updated_at.isoformat(),
                    purchase.id,
                ),
            )
        logger.info("purchase_updated", purchase_id=purchase.id)
        return purchase

    async def delete(self, purchase_id: int) -> bool:
        async with self._pool.transaction("delete_purchase") as conn:
            cursor = await conn.execute(
                "DELETE FROM purchases WHERE id = ?", (purchase_id,)
            )
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info("purchase_deleted", purchase_id=purchase_id)
        return deleted

    @classmethod
    def _row_to_purchase(cls, row: aiosqlite.Row) -> Purchase:
        # cost_per_item is re-derived by the model validator
        return Purchase(
            id=row["id"],
            date=cls._parse_date(row["date"]),
            category_id=row["category_id"],
            category_name=row["category_name"],
            quantity=int(row["quantity"]),
            total_cost=float(row["total_cost"]),
            selling_price_per_item=float(row["selling_price_per_item"]),
            supplier=row["supplier"] or "",
            created_at=cls._parse_datetime(row["created_at"]),
            updated_at=cls._parse_datetime(row["updated_at"]),
        )
