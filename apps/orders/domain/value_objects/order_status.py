"""
Order status value object.
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Lifecycle of an order. Orders are created pending."""
    PENDING = 'pending'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'

    @classmethod
    def choices(cls):
        return [(status.value, status.name.title()) for status in cls]
