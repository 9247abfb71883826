"""
Customer repository interface.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from uuid import UUID


class CustomerRepository(ABC):
    """Abstract repository for customers' address book."""

    @abstractmethod
    def find_id_by_user(self, user_id: Any) -> Optional[UUID]:
        """Find the customer linked to an authenticated user."""

    @abstractmethod
    def update_default_addresses(
        self,
        customer_id: UUID,
        shipping_address: Dict[str, Any],
        billing_address: Dict[str, Any],
    ) -> bool:
        """Overwrite the saved default addresses. Returns False if the customer is unknown."""
