from .low_stock_notifier import LowStockNotifier

__all__ = ['LowStockNotifier']
