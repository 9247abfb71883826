"""
Stock unit reference value object.
"""
from dataclasses import dataclass
from typing import Optional, Tuple
from uuid import UUID

from shared.domain import ValueObject


@dataclass(frozen=True)
class StockUnitRef(ValueObject):
    """
    Identifies the row that carries stock for a cart line.

    A line with a variant draws on the variant's stock, otherwise on the
    product's own stock. Refs order by (product_id, variant_id), which is the
    global order in which stock rows are locked.
    """
    product_id: UUID
    variant_id: Optional[UUID] = None

    @property
    def is_variant(self) -> bool:
        return self.variant_id is not None

    @property
    def sort_key(self) -> Tuple[str, str]:
        return (str(self.product_id), str(self.variant_id) if self.variant_id else '')

    def __str__(self) -> str:
        if self.is_variant:
            return f"variant {self.variant_id} of product {self.product_id}"
        return f"product {self.product_id}"
