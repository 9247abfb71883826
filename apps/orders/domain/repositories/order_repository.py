"""
Order repository interface.
"""
from abc import ABC, abstractmethod
from typing import Optional

from ..entities.order import Order
from ..entities.order_item import OrderItem


class OrderNumberTaken(Exception):
    """Raised by ``OrderRepository.add`` when the order number is already used."""


class OrderRepository(ABC):
    """Abstract repository for Order aggregate."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """
        Insert the order row without its items.

        Raises:
            OrderNumberTaken: If the unique constraint on the order number fails.
                The caller's transaction stays usable.
        """

    @abstractmethod
    def add_item(self, item: OrderItem) -> None:
        """Insert one order item for an order already added."""

    @abstractmethod
    def find_by_order_number(self, order_number: str) -> Optional[Order]:
        """Find an order with its items by order number."""
