"""Manage Categories Use Case - CRUD with unique, trimmed names."""

from shopledger.application.dto.requests import (
    CreateCategoryRequest,
    UpdateCategoryRequest,
)
from shopledger.config import get_logger
from shopledger.core.entities.category import Category
from shopledger.core.exceptions import (
    CategoryNotFoundError,
    DuplicateCategoryError,
    ValidationError,
)
from shopledger.core.interfaces.ledger_store import ICategoryStore

logger = get_logger(__name__)


class ManageCategoriesUseCase:
    """Create, rename, list and delete categories."""

    def __init__(self, category_store: ICategoryStore):
        self._store = category_store

    @staticmethod
    def _clean_name(name: str) -> str:
        cleaned = name.strip()
        if not cleaned:
            raise ValidationError("name", "Category name is required", name)
        return cleaned

    async def list_categories(self) -> list[Category]:
        return await self._store.list_categories()

    async def get(self, category_id: int) -> Category:
        category = await self._store.get(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category

    async def create(self, request: CreateCategoryRequest) -> Category:
        name = self._clean_name(request.name)
        if await self._store.get_by_name(name) is not None:
            raise DuplicateCategoryError(name)
        return await self._store.create(Category(name=name))

    async def update(self, category_id: int, request: UpdateCategoryRequest) -> Category:
        """Rename a category. Existing transactions keep their old name snapshot."""
        category = await self.get(category_id)
        name = self._clean_name(request.name)

        existing = await self._store.get_by_name(name)
        if existing is not None and existing.id != category_id:
            raise DuplicateCategoryError(name)

        category.name = name
        return await self._store.update(category)

    async def delete(self, category_id: int) -> int:
        if not await self._store.delete(category_id):
            raise CategoryNotFoundError(category_id)
        return category_id
