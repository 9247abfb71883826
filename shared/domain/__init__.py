# Shared domain module
from .base_entity import BaseEntity, AggregateRoot
from .base_value_object import ValueObject
from .domain_event import DomainEvent
from .exceptions import (
    BusinessRuleViolationError,
    DomainException,
    EntityNotFoundError,
    InsufficientStockError,
    PersistenceError,
    StockShortage,
    ValidationError,
)

__all__ = [
    'BaseEntity',
    'AggregateRoot',
    'ValueObject',
    'DomainEvent',
    'DomainException',
    'EntityNotFoundError',
    'ValidationError',
    'BusinessRuleViolationError',
    'InsufficientStockError',
    'StockShortage',
    'PersistenceError',
]
