"""
Update category use case.
"""
import logging
from dataclasses import dataclass

from shared.application import AsyncUseCase, UnitOfWork
from ...domain.repositories.category_repository import CategoryRepository
from ..dtos.category_dto import CategoryDTO, UpdateCategoryDTO

logger = logging.getLogger(__name__)


@dataclass
class UpdateCategoryUseCase(AsyncUseCase[UpdateCategoryDTO, CategoryDTO]):
    """Use case for renaming, describing and (de)activating a category."""

    category_repository: CategoryRepository
    unit_of_work: UnitOfWork

    async def execute(self, input_dto: UpdateCategoryDTO) -> CategoryDTO:
        category = await self.category_repository.get_by_id(input_dto.id)

        category.update(input_dto.name, input_dto.description)

        if input_dto.is_active is not None:
            if input_dto.is_active:
                category.activate()
            else:
                category.deactivate()

        await self.category_repository.update(category)
        await self.unit_of_work.commit()

        logger.info("Category updated: id=%s", category.id)
        return CategoryDTO.from_entity(category)
