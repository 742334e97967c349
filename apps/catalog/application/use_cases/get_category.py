"""
Get category use case.
"""
import logging
from dataclasses import dataclass

from shared.application import AsyncUseCase
from ...domain.repositories.category_repository import CategoryRepository
from ..dtos.category_dto import CategoryDTO, GetCategoryDTO

logger = logging.getLogger(__name__)


@dataclass
class GetCategoryUseCase(AsyncUseCase[GetCategoryDTO, CategoryDTO]):
    """Use case for fetching a single category."""

    category_repository: CategoryRepository

    async def execute(self, input_dto: GetCategoryDTO) -> CategoryDTO:
        # The repository raises CategoryNotFoundError for unknown ids
        category = await self.category_repository.get_by_id(input_dto.id)

        logger.debug("Category loaded: id=%s", category.id)
        return CategoryDTO.from_entity(category)
