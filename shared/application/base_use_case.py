"""
Base use case classes.
"""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')


class AsyncUseCase(ABC, Generic[InputDTO, OutputDTO]):
    """Base async use case class.

    Use cases do not recover from domain errors: whatever the entity or the
    repository raises reaches the caller unchanged.
    """

    @abstractmethod
    async def execute(self, input_dto: InputDTO) -> OutputDTO:
        """Execute the use case asynchronously."""
        pass
