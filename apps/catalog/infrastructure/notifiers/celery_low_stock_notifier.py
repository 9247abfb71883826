"""
Celery backed LowStockNotifier.
"""
import logging

from ...domain.services.low_stock_notifier import LowStockNotifier
from ...domain.value_objects.stock_unit_ref import StockUnitRef

logger = logging.getLogger(__name__)


class CeleryLowStockNotifier(LowStockNotifier):
    """Queues ``catalog.send_low_stock_alert``; broker failures are logged, not raised."""

    def notify_low_stock(self, stock_unit: StockUnitRef, current_stock: int, threshold: int) -> None:
        from ...tasks import send_low_stock_alert

        try:
            send_low_stock_alert.delay(
                str(stock_unit.product_id),
                str(stock_unit.variant_id) if stock_unit.variant_id else None,
                current_stock,
                threshold,
            )
        except Exception as e:
            logger.error(f"Could not queue low stock alert for {stock_unit}: {str(e)}", exc_info=True)
