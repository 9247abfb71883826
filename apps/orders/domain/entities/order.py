"""
Order entity (Aggregate Root).
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Sequence
from uuid import UUID

from shared.domain import AggregateRoot
from ..events.order_placed import OrderPlaced
from ..value_objects.address import Address
from ..value_objects.cart_line import CartLine
from ..value_objects.contact_info import ContactInfo
from ..value_objects.order_number import OrderNumber
from ..value_objects.order_status import OrderStatus
from ..value_objects.order_totals import OrderTotals
from .order_item import OrderItem


@dataclass(kw_only=True, eq=False)
class Order(AggregateRoot):
    """Order entity representing a committed checkout."""
    order_number: OrderNumber
    customer_id: Optional[UUID]
    contact: ContactInfo
    billing_address: Address
    shipping_address: Address
    subtotal: Decimal
    tax: Decimal
    shipping: Decimal
    total: Decimal
    status: OrderStatus = OrderStatus.PENDING
    items: List[OrderItem] = field(default_factory=list)

    @classmethod
    def place(
        cls,
        *,
        customer_id: Optional[UUID],
        contact: ContactInfo,
        billing_address: Address,
        shipping_address: Address,
        lines: Sequence[CartLine],
        totals: OrderTotals,
        order_number: Optional[OrderNumber] = None,
    ) -> 'Order':
        """Factory method to create a pending order from cart lines."""
        stored = totals.rounded()
        order = cls(
            order_number=order_number or OrderNumber.generate(),
            customer_id=customer_id,
            contact=contact,
            billing_address=billing_address,
            shipping_address=shipping_address,
            subtotal=stored.subtotal,
            tax=stored.tax,
            shipping=stored.shipping,
            total=stored.total,
        )
        order.items = [OrderItem.from_cart_line(order.id, line) for line in lines]
        if sum((item.line_subtotal for item in order.items), Decimal('0')) != totals.subtotal:
            raise ValueError("Order subtotal does not match its items")
        return order

    def mark_placed(self) -> None:
        """Record that the order, under its final number, has been stored."""
        self.record_event(
            OrderPlaced(
                order_id=self.id,
                order_number=self.order_number.value,
                customer_id=self.customer_id,
                total=self.total,
            )
        )

    def assign_order_number(self, order_number: OrderNumber) -> None:
        """Replace the number after a uniqueness clash; only valid before the order is stored."""
        self.order_number = order_number

    @property
    def is_guest(self) -> bool:
        return self.customer_id is None

    @property
    def item_count(self) -> int:
        """Get the total number of items."""
        return sum(item.quantity for item in self.items)
