# Use cases
from .create_category import CreateCategoryUseCase
from .get_category import GetCategoryUseCase
from .update_category import UpdateCategoryUseCase

__all__ = ['CreateCategoryUseCase', 'GetCategoryUseCase', 'UpdateCategoryUseCase']
