"""
Domain exceptions.
"""
from dataclasses import asdict, dataclass
from typing import List, Optional
from uuid import UUID


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_name: str, entity_id: str):
        super().__init__(
            message=f"{entity_name} with id '{entity_id}' not found",
            code="ENTITY_NOT_FOUND"
        )
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationError(DomainException):
    """Raised when validation fails."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message=message, code="VALIDATION_ERROR")
        self.field = field


class BusinessRuleViolationError(DomainException):
    """Raised when a business rule is violated."""

    def __init__(self, message: str, rule: str = None, code: str = "BUSINESS_RULE_VIOLATION"):
        super().__init__(message=message, code=code)
        self.rule = rule


@dataclass(frozen=True)
class StockShortage:
    """One cart line that could not be covered by the locked stock."""
    product_id: UUID
    variant_id: Optional[UUID]
    product_name: str
    requested: int
    available: int

    def to_dict(self) -> dict:
        data = asdict(self)
        data['product_id'] = str(self.product_id)
        data['variant_id'] = str(self.variant_id) if self.variant_id else None
        return data


class InsufficientStockError(BusinessRuleViolationError):
    """Raised when one or more lines ask for more than the locked stock holds."""

    def __init__(self, shortages: List[StockShortage]):
        names = ', '.join(
            f"'{s.product_name}' (requested {s.requested}, available {s.available})"
            for s in shortages
        )
        super().__init__(
            message=f"Insufficient stock for {names}",
            rule="no_oversell",
            code="INSUFFICIENT_STOCK",
        )
        self.shortages = list(shortages)


class PersistenceError(DomainException):
    """Raised when the datastore fails; nothing durable happened and the call may be retried."""

    def __init__(self, message: str = "The order could not be saved, please try again", code: str = "PERSISTENCE_ERROR"):
        super().__init__(message=message, code=code)
