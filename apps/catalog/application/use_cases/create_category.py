"""
Create category use case.
"""
import logging
from dataclasses import dataclass

from shared.application import AsyncUseCase, UnitOfWork
from ...domain.entities.category import Category
from ...domain.repositories.category_repository import CategoryRepository
from ..dtos.category_dto import CategoryDTO, CreateCategoryDTO

logger = logging.getLogger(__name__)


@dataclass
class CreateCategoryUseCase(AsyncUseCase[CreateCategoryDTO, CategoryDTO]):
    """Use case for creating a new category."""

    category_repository: CategoryRepository
    unit_of_work: UnitOfWork

    async def execute(self, input_dto: CreateCategoryDTO) -> CategoryDTO:
        # Validates before anything touches the repository
        category = Category(
            name=input_dto.name,
            description=input_dto.description,
            is_active=input_dto.is_active,
        )

        await self.category_repository.insert(category)
        await self.unit_of_work.commit()

        logger.info("Category created: id=%s name=%r", category.id, category.name)
        return CategoryDTO.from_entity(category)
