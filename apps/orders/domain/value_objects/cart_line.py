"""
Cart line value object.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID

from apps.catalog.domain.value_objects import StockUnitRef
from shared.domain import ValueObject
from ..exceptions import InvalidQuantityError


@dataclass(frozen=True)
class CartLine(ValueObject):
    """
    One product or variant with a quantity, as read from the cart.

    The unit price is resolved at read time from the variant if there is one,
    otherwise from the product. Stock seen at read time is advisory only.
    """
    product_id: UUID
    quantity: int
    unit_price: Decimal
    display_name: str
    variant_id: Optional[UUID] = None
    variant_name: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity <= 0:
            raise InvalidQuantityError(self.quantity)
        if not isinstance(self.unit_price, Decimal):
            object.__setattr__(self, 'unit_price', Decimal(str(self.unit_price)))

    @property
    def stock_unit(self) -> StockUnitRef:
        return StockUnitRef(product_id=self.product_id, variant_id=self.variant_id)

    @property
    def subtotal(self) -> Decimal:
        """Exact line amount; never rounded."""
        return self.unit_price * self.quantity
