"""
Order DTOs.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import UUID

from ...domain.entities.order import Order
from ...domain.entities.order_item import OrderItem
from ...domain.repositories.cart_repository import CartItemRequest


@dataclass
class CheckoutDTO:
    """DTO for placing an order."""
    email: str
    billing_address: Dict[str, Any]
    shipping_address: Dict[str, Any]
    phone: Optional[str] = None
    customer_id: Optional[UUID] = None
    items: List[CartItemRequest] = field(default_factory=list)


@dataclass
class OrderItemDTO:
    """DTO for order item output."""
    id: UUID
    product_id: UUID
    variant_id: Optional[UUID]
    product_name: str
    variant_name: Optional[str]
    quantity: int
    unit_price: Decimal
    line_subtotal: Decimal

    @classmethod
    def from_entity(cls, item: OrderItem) -> 'OrderItemDTO':
        return cls(
            id=item.id,
            product_id=item.product_id,
            variant_id=item.variant_id,
            product_name=item.product_name,
            variant_name=item.variant_name,
            quantity=item.quantity,
            unit_price=item.unit_price,
            line_subtotal=item.line_subtotal,
        )


@dataclass
class OrderDTO:
    """DTO for order output."""
    id: UUID
    order_number: str
    customer_id: Optional[UUID]
    status: str
    subtotal: Decimal
    tax: Decimal
    shipping: Decimal
    total: Decimal
    email: str
    phone: Optional[str]
    billing_address: Dict[str, Any]
    shipping_address: Dict[str, Any]
    items: List[OrderItemDTO]
    item_count: int
    created_at: datetime

    @classmethod
    def from_entity(cls, order: Order) -> 'OrderDTO':
        """Create DTO from entity."""
        return cls(
            id=order.id,
            order_number=order.order_number.value,
            customer_id=order.customer_id,
            status=order.status.value,
            subtotal=order.subtotal,
            tax=order.tax,
            shipping=order.shipping,
            total=order.total,
            email=order.contact.email,
            phone=order.contact.phone,
            billing_address=order.billing_address.to_dict(),
            shipping_address=order.shipping_address.to_dict(),
            items=[OrderItemDTO.from_entity(item) for item in order.items],
            item_count=order.item_count,
            created_at=order.created_at,
        )
