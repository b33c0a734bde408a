"""SQLite implementation of the sale ledger."""

from datetime import datetime

import aiosqlite

from shopledger.config import get_logger
from shopledger.core.entities.transaction import Sale
from shopledger.core.interfaces.ledger_store import ISaleStore, LedgerFilter
from shopledger.infrastructure.storage.sqlite.base import SQLiteStore

logger = get_logger(__name__)


class SQLiteSaleStore(SQLiteStore, ISaleStore):
    """SQLite implementation of sale storage."""

    async def create(self, sale: Sale) -> Sale:
        now = datetime.now()
        sale.created_at = now
        sale.updated_at = now
        async with self._pool.transaction("create_sale") as conn:
            cursor = await conn.execute(
                """
                INSERT INTO sales (
                    date, category_id, category_name, quantity,
                    selling_price_per_item, total_amount, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    sale.date.isoformat(),
                    sale.category_id,
                    sale.category_name,
                    sale.quantity,
                    sale.selling_price_per_item,
                    sale.total_amount,
                    sale.created_at.isoformat(),
                    sale.updated_at.isoformat(),
                ),
            )
            sale.id = cursor.lastrowid
        logger.info(
            "sale_created",
            sale_id=sale.id,
            category_id=sale.category_id,
            qty=sale.quantity,
            total=sale.total_amount,
        )
        return sale

    async def get(self, sale_id: int) -> Sale | None:
        async with self._pool.acquire("get_sale") as conn:
            cursor = await conn.execute("SELECT * FROM sales WHERE id = ?", (sale_id,))
            row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_sale(row)

    async def list_sales(self, filter: LedgerFilter | None = None) -> list[Sale]:
        where, params = self._filter_clause(filter)
        async with self._pool.acquire("list_sales") as conn:
            cursor = await conn.execute(
                f"SELECT * FROM sales {where} ORDER BY date DESC, id DESC",
                params,
            )
            rows = await cursor.fetchall()
        return [self._row_to_sale(row) for row in rows]

    async def update(self, sale: Sale) -> Sale:
        sale.updated_at = datetime.now()
        async with self._pool.transaction("update_sale") as conn:
            await conn.execute(
                """
                UPDATE sales SET
                    date = ?,
                    category_id = ?,
                    category_name = ?,
                    quantity = ?,
                    selling_price_per_item = ?,
                    total_amount = ?,
                    updated_at = ?
                WHERE id = ?
                """,
                (
                    sale.date.isoformat(),
                    sale.category_id,
                    sale.category_name,
                    sale.quantity,
                    sale.selling_price_per_item,
                    sale.total_amount,
                    sale.updated_at.isoformat(),
                    sale.id,
                ),
            )
        logger.info("sale_updated", sale_id=sale.id)
        return sale

    async def delete(self, sale_id: int) -> bool:
        async with self._pool.transaction("delete_sale") as conn:
            cursor = await conn.execute("DELETE FROM sales WHERE id = ?", (sale_id,))
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info("sale_deleted", sale_id=sale_id)
        return deleted

    @classmethod
    def _row_to_sale(cls, row: aiosqlite.Row) -> Sale:
        return Sale(
            id=row["id"],
            date=cls._parse_date(row["date"]),
            category_id=row["category_id"],
            category_name=row["category_name"],
            quantity=int(row["quantity"]),
            selling_price_per_item=float(row["selling_price_per_item"]),
            created_at=cls._parse_datetime(row["created_at"]),
            updated_at=cls._parse_datetime(row["updated_at"]),
        )
