"""
Django implementation of UnitOfWork.
"""
import logging
from typing import Callable, List

from asgiref.sync import sync_to_async
from django.db import transaction

from shared.application.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)

Operation = Callable[[], None]


class DjangoUnitOfWork(UnitOfWork):
    """Collects repository writes and applies them in one database transaction."""

    def __init__(self, using: str = 'default'):
        self.using = using
        self._operations: List[Operation] = []

    def register(self, operation: Operation) -> None:
        """Stage a synchronous ORM write to run on commit."""
        self._operations.append(operation)

    @property
    def has_pending(self) -> bool:
        return bool(self._operations)

    async def commit(self) -> None:
        operations, self._operations = self._operations, []
        await sync_to_async(self._apply)(operations)

    def _apply(self, operations: List[Operation]) -> None:
        with transaction.atomic(using=self.using):
            for operation in operations:
                operation()
        logger.debug("Committed %d operation(s) on '%s'", len(operations), self.using)
