"""
Low stock notification port.
"""
from abc import ABC, abstractmethod

from ..value_objects.stock_unit_ref import StockUnitRef


class LowStockNotifier(ABC):
    """Fire-and-forget sink for low stock alerts."""

    @abstractmethod
    def notify_low_stock(self, stock_unit: StockUnitRef, current_stock: int, threshold: int) -> None:
        """Queue an alert; the return value and delivery outcome are not observed."""
