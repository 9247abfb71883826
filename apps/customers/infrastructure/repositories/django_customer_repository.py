"""
Django ORM implementation of CustomerRepository.
"""
from typing import Any, Dict, Optional
from uuid import UUID

from django.utils import timezone

from ...domain.repositories.customer_repository import CustomerRepository
from ..models.customer_model import CustomerModel


class DjangoCustomerRepository(CustomerRepository):
    """Django ORM based customer repository implementation."""

    def find_id_by_user(self, user_id: Any) -> Optional[UUID]:
        return CustomerModel.objects.filter(user_id=user_id).values_list('id', flat=True).first()

    def update_default_addresses(
        self,
        customer_id: UUID,
        shipping_address: Dict[str, Any],
        billing_address: Dict[str, Any],
    ) -> bool:
        updated = CustomerModel.objects.filter(id=customer_id).update(
            default_shipping_address=shipping_address,
            default_billing_address=billing_address,
            updated_at=timezone.now(),
        )
        return updated > 0
