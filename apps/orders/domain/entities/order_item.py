"""
Order item entity.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID

from apps.catalog.domain.value_objects import StockUnitRef
from shared.domain import BaseEntity
from ..value_objects.cart_line import CartLine


@dataclass(kw_only=True, eq=False)
class OrderItem(BaseEntity):
    """Snapshot of a purchased product or variant, frozen at commit time."""
    order_id: UUID
    product_id: UUID
    product_name: str
    quantity: int
    unit_price: Decimal
    line_subtotal: Decimal
    variant_id: Optional[UUID] = None
    variant_name: Optional[str] = None

    @classmethod
    def from_cart_line(cls, order_id: UUID, line: CartLine) -> 'OrderItem':
        return cls(
            order_id=order_id,
            product_id=line.product_id,
            variant_id=line.variant_id,
            product_name=line.display_name,
            variant_name=line.variant_name,
            quantity=line.quantity,
            unit_price=line.unit_price,
            line_subtotal=line.subtotal,
        )

    @property
    def stock_unit(self) -> StockUnitRef:
        return StockUnitRef(product_id=self.product_id, variant_id=self.variant_id)
