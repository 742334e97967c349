# Shared domain module
from .base_entity import BaseEntity, AggregateRoot, utc_now
from .exceptions import DomainException, EntityNotFoundError, ValidationError

__all__ = [
    'BaseEntity',
    'AggregateRoot',
    'utc_now',
    'DomainException',
    'EntityNotFoundError',
    'ValidationError',
]
