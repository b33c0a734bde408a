"""SQLite implementation of category storage."""

import sqlite3
from datetime import datetime

import aiosqlite

from shopledger.config import get_logger
from shopledger.core.entities.category import Category
from shopledger.core.exceptions import DuplicateCategoryError
from shopledger.core.interfaces.ledger_store import ICategoryStore
from shopledger.infrastructure.storage.sqlite.base import SQLiteStore

logger = get_logger(__name__)


class SQLiteCategoryStore(SQLiteStore, ICategoryStore):
    """SQLite implementation of category storage."""

    async def create(self, category: Category) -> Category:
        now = datetime.now()
        category.created_at = now
        category.updated_at = now
        async with self._pool.transaction("create_category") as conn:
            try:
                cursor = await conn.execute(
                    """
                    INSERT INTO categories (name, created_at, updated_at)
                    VALUES (?, ?, ?)
                    """,
                    (
                        category.name,
                        category.created_at.isoformat(),
                        category.updated_at.isoformat(),
                    ),
                )
            except sqlite3.IntegrityError as e:
                raise DuplicateCategoryError(category.name) from e
            category.id = cursor.lastrowid
        logger.info("category_created", category_id=category.id, name=category.name)
        return category

    async def get(self, category_id: int) -> Category | None:
        async with self._pool.acquire("get_category") as conn:
            cursor = await conn.execute(
                "SELECT * FROM categories WHERE id = ?", (category_id,)
            )
            row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_category(row)

    async def get_by_name(self, name: str) -> Category | None:
        async with self._pool.acquire("get_category_by_name") as conn:
            cursor = await conn.execute(
                "SELECT * FROM categories WHERE name = ?", (name,)
            )
            row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_category(row)

    async def list_categories(self) -> list[Category]:
        async with self._pool.acquire("list_categories") as conn:
            cursor = await conn.execute(
                "SELECT * FROM categories ORDER BY created_at DESC, id DESC"
            )
            rows = await cursor.fetchall()
        return [self._row_to_category(row) for row in rows]

    async def update(self, category: Category) -> Category:
        category.updated_at = datetime.now()
        async with self._pool.transaction("update_category") as conn:
            try:
                await conn.execute(
                    "UPDATE categories SET name = ?, updated_at = ? WHERE id = ?",
                    (category.name, category.updated_at.isoformat(), category.id),
                )
            except sqlite3.IntegrityError as e:
                raise DuplicateCategoryError(category.name) from e
        logger.info("category_updated", category_id=category.id)
        return category

    async def delete(self, category_id: int) -> bool:
        async with self._pool.transaction("delete_category") as conn:
            cursor = await conn.execute(
                "DELETE FROM categories WHERE id = ?", (category_id,)
            )
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info("category_deleted", category_id=category_id)
        return deleted

    @classmethod
    def _row_to_category(cls, row: aiosqlite.Row) -> Category:
        return Category(
            id=row["id"],
            name=row["name"],
            created_at=cls._parse_datetime(row["created_at"]),
            updated_at=cls._parse_datetime(row["updated_at"]),
        )
