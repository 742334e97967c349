"""
Django ORM implementation of CategoryRepository.
"""
from functools import partial
from uuid import UUID

from shared.infrastructure.persistence import DjangoUnitOfWork
from ...domain.entities.category import Category
from ...domain.exceptions import CategoryNotFoundError
from ...domain.repositories.category_repository import CategoryRepository
from ..models.category_model import CategoryModel


class DjangoCategoryRepository(CategoryRepository):
    """Django ORM based category repository implementation.

    Writes are staged on the unit of work; reads hit the database directly.
    """

    def __init__(self, unit_of_work: DjangoUnitOfWork):
        self.unit_of_work = unit_of_work

    async def insert(self, category: Category) -> None:
        """Stage a new category row."""
        self.unit_of_work.register(partial(self._create, category))

    async def get_by_id(self, category_id: UUID) -> Category:
        """Find a category by ID."""
        try:
            model = await CategoryModel.objects.using(self.unit_of_work.using).aget(id=category_id)
        except CategoryModel.DoesNotExist:
            raise CategoryNotFoundError(category_id)
        return self._to_entity(model)

    async def update(self, category: Category) -> None:
        """Stage the new state of a category row."""
        self.unit_of_work.register(partial(self._save, category))

    def _create(self, category: Category) -> None:
        CategoryModel.objects.using(self.unit_of_work.using).create(
            id=category.id,
            name=category.name,
            description=category.description,
            is_active=category.is_active,
            created_at=category.created_at,
        )

    def _save(self, category: Category) -> None:
        updated = CategoryModel.objects.using(self.unit_of_work.using).filter(id=category.id).update(
            name=category.name,
            description=category.description,
            is_active=category.is_active,
        )
        if not updated:
            raise CategoryNotFoundError(category.id)

    def _to_entity(self, model: CategoryModel) -> Category:
        """Convert Django model to domain entity."""
        return Category(
            id=model.id,
            name=model.name,
            description=model.description,
            is_active=model.is_active,
            created_at=model.created_at,
        )
