"""
Order totals value object.
"""
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from shared.domain import ValueObject
from .cart_line import CartLine

CENT = Decimal('0.01')


@dataclass(frozen=True)
class OrderTotals(ValueObject):
    """
    Order amounts in exact decimal arithmetic.

    Lines are summed without rounding. ``rounded()`` is the single rounding
    step, applied to the aggregates when the order is stored: each component
    is quantized to cents and the total is the sum of the quantized
    components, so total == subtotal + tax + shipping holds on stored values.
    """
    subtotal: Decimal
    tax: Decimal
    shipping: Decimal
    total: Decimal

    @classmethod
    def calculate(cls, lines: Iterable[CartLine], tax_rate: Decimal, shipping: Decimal) -> 'OrderTotals':
        subtotal = sum((line.subtotal for line in lines), Decimal('0'))
        tax = subtotal * tax_rate
        return cls(
            subtotal=subtotal,
            tax=tax,
            shipping=shipping,
            total=subtotal + tax + shipping,
        )

    def rounded(self) -> 'OrderTotals':
        subtotal = self.subtotal.quantize(CENT, rounding=ROUND_HALF_UP)
        tax = self.tax.quantize(CENT, rounding=ROUND_HALF_UP)
        shipping = self.shipping.quantize(CENT, rounding=ROUND_HALF_UP)
        return OrderTotals(
            subtotal=subtotal,
            tax=tax,
            shipping=shipping,
            total=subtotal + tax + shipping,
        )
