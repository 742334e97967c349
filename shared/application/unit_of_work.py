"""
Unit of work interface.
"""
from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Makes the writes staged by repositories durable as one transaction."""

    @abstractmethod
    async def commit(self) -> None:
        """Commit every staged change."""
        pass
