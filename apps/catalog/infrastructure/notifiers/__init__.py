from .celery_low_stock_notifier import CeleryLowStockNotifier

__all__ = ['CeleryLowStockNotifier']
