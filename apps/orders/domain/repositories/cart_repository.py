"""
Cart repository interface.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence
from uuid import UUID

from ..value_objects.cart_line import CartLine


@dataclass(frozen=True)
class CartItemRequest:
    """Unresolved cart entry, as posted by a guest."""
    product_id: UUID
    quantity: int
    variant_id: Optional[UUID] = None


class CartRepository(ABC):
    """Reads cart lines with resolved prices and clears persistent carts."""

    @abstractmethod
    def get_lines(self, customer_id: UUID) -> List[CartLine]:
        """Current lines of the customer's persistent cart. Not lock protected."""

    @abstractmethod
    def build_lines(self, requests: Sequence[CartItemRequest]) -> List[CartLine]:
        """Resolve guest cart entries against the catalog."""

    @abstractmethod
    def clear(self, customer_id: UUID) -> None:
        """Delete every line of the customer's persistent cart."""
