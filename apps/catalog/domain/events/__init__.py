# Domain events
from .low_stock_detected import LowStockDetected

__all__ = ['LowStockDetected']
