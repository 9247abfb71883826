"""
Stock level value object.
"""
from dataclasses import dataclass
from typing import Optional

from shared.domain import ValueObject


@dataclass(frozen=True)
class StockLevel(ValueObject):
    """Stock quantity, where None means stock is not tracked."""
    quantity: Optional[int]

    def __post_init__(self):
        if self.quantity is not None and self.quantity < 0:
            raise ValueError("Stock quantity cannot be negative")

    @property
    def is_tracked(self) -> bool:
        return self.quantity is not None

    def can_fulfil(self, requested: int) -> bool:
        """Untracked stock fulfils any quantity."""
        return not self.is_tracked or self.quantity >= requested

    def decreased_by(self, amount: int) -> 'StockLevel':
        if not self.is_tracked:
            return self
        return StockLevel(quantity=self.quantity - amount)

    def is_low(self, threshold: int) -> bool:
        """At or below the threshold; untracked stock is never low."""
        return self.is_tracked and self.quantity <= threshold

    @property
    def available(self) -> int:
        """Quantity to report on a shortage; only meaningful when tracked."""
        return self.quantity if self.is_tracked else 0
