# Serializers
from .order_serializer import (
    AddressSerializer,
    CheckoutItemSerializer,
    CheckoutSerializer,
    OrderItemSerializer,
    OrderSerializer,
)

__all__ = [
    'AddressSerializer',
    'CheckoutItemSerializer',
    'CheckoutSerializer',
    'OrderItemSerializer',
    'OrderSerializer',
]
