# DTOs
from .category_dto import CategoryDTO, CreateCategoryDTO, GetCategoryDTO, UpdateCategoryDTO

__all__ = ['CategoryDTO', 'CreateCategoryDTO', 'GetCategoryDTO', 'UpdateCategoryDTO']
