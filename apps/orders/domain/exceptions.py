"""
Order domain exceptions.
"""
from shared.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    InsufficientStockError,
    PersistenceError,
    ValidationError,
)


class OrderNotFoundError(EntityNotFoundError):
    """Raised when an order is not found."""

    def __init__(self, identifier: str):
        super().__init__(entity_name="Order", entity_id=identifier)
        self.identifier = identifier


class EmptyCartError(DomainException):
    """Raised when trying to checkout an empty cart."""

    def __init__(self):
        super().__init__(
            message="Cannot checkout an empty cart",
            code="EMPTY_CART"
        )


class InvalidEmailError(ValidationError):
    """Raised when the contact email is missing or malformed."""

    def __init__(self, email: str):
        super().__init__(message=f"Invalid email format: '{email}'", field="email")
        self.email = email


class InvalidAddressError(ValidationError):
    """Raised when a structured address misses a required field."""

    def __init__(self, field: str, message: str):
        super().__init__(message=message, field=field)


class InvalidQuantityError(ValidationError):
    """Raised when a cart line quantity is not a positive integer."""

    def __init__(self, quantity):
        super().__init__(message=f"Quantity must be a positive integer, got {quantity!r}", field="quantity")
        self.quantity = quantity


class OrderNumberCollisionError(PersistenceError):
    """Raised when every generated order number collided with an existing one."""

    def __init__(self, attempts: int):
        super().__init__(
            message=f"Could not allocate a unique order number after {attempts} attempts",
            code="ORDER_NUMBER_COLLISION",
        )
        self.attempts = attempts


__all__ = [
    'OrderNotFoundError',
    'EmptyCartError',
    'InvalidEmailError',
    'InvalidAddressError',
    'InvalidQuantityError',
    'OrderNumberCollisionError',
    'InsufficientStockError',
    'PersistenceError',
    'ValidationError',
]
