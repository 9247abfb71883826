"""
Stock repository interface.
"""
from abc import ABC, abstractmethod

from ..value_objects.stock_level import StockLevel
from ..value_objects.stock_unit_ref import StockUnitRef


class StockRepository(ABC):
    """
    Access to the stock rows of products and variants.

    Both methods must be called inside the caller's transaction; the lock taken
    by ``lock_and_read_stock`` is held until that transaction ends.
    """

    @abstractmethod
    def lock_and_read_stock(self, stock_unit: StockUnitRef) -> StockLevel:
        """
        Take an exclusive row lock on the stock unit and return its current level.

        Raises:
            StockUnitNotFoundError: If the product or variant does not exist or is inactive.
        """

    @abstractmethod
    def decrement_stock(self, stock_unit: StockUnitRef, amount: int) -> None:
        """Decrease tracked stock by amount. Untracked stock is left alone."""
