"""
Low stock detected domain event.
"""
from dataclasses import dataclass

from shared.domain import DomainEvent
from ..value_objects.stock_unit_ref import StockUnitRef


@dataclass(frozen=True, kw_only=True)
class LowStockDetected(DomainEvent):
    """Event raised when a decrement leaves a stock unit at or below the threshold."""
    stock_unit: StockUnitRef
    current_stock: int
    threshold: int
