# Value objects
from .stock_level import StockLevel
from .stock_unit_ref import StockUnitRef

__all__ = ['StockLevel', 'StockUnitRef']
