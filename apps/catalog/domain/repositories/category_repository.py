"""
Category repository interface.
"""
from abc import ABC, abstractmethod
from uuid import UUID

from ..entities.category import Category


class CategoryRepository(ABC):
    """Abstract repository for Category.

    Writes are staged and become durable when the unit of work commits.
    """

    @abstractmethod
    async def insert(self, category: Category) -> None:
        """Stage a new category."""
        pass

    @abstractmethod
    async def get_by_id(self, category_id: UUID) -> Category:
        """Load a category.

        Raises:
            CategoryNotFoundError: no category has this id.
        """
        pass

    @abstractmethod
    async def update(self, category: Category) -> None:
        """Stage the new state of an existing category."""
        pass
