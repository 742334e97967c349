# Shared application module
from .base_use_case import AsyncUseCase
from .unit_of_work import UnitOfWork

__all__ = ['AsyncUseCase', 'UnitOfWork']
