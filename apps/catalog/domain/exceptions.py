"""
Catalog domain exceptions.
"""
from uuid import UUID

from shared.domain.exceptions import EntityNotFoundError, ValidationError


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a category is not found."""

    def __init__(self, category_id: UUID):
        super().__init__(entity_name="Category", entity_id=str(category_id))
        self.category_id = category_id


# Re-export for convenience
__all__ = [
    'CategoryNotFoundError',
    'ValidationError',
]
