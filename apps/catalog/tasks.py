"""
Catalog Celery tasks.
"""
import logging
from typing import Optional

from celery import shared_task
from django.conf import settings
from django.core.mail import send_mail

from shared.application.config import CheckoutConfig
from shared.infrastructure.config import DjangoSettingsConfigProvider

logger = logging.getLogger(__name__)


def describe_stock_unit(product_id: str, variant_id: Optional[str]) -> Optional[str]:
    """Human readable name of a product or variant, or None if it is gone."""
    from .infrastructure.models import ProductModel, ProductVariantModel

    if variant_id:
        variant = (
            ProductVariantModel.objects.select_related('product')
            .filter(id=variant_id, product_id=product_id)
            .first()
        )
        if variant is None:
            return None
        label = variant.variant_name or variant.sku
        return f"{variant.product.name} ({label})"

    product = ProductModel.objects.filter(id=product_id).first()
    return product.name if product else None


@shared_task(name='catalog.send_low_stock_alert')
def send_low_stock_alert(
    product_id: str,
    variant_id: Optional[str],
    current_stock: int,
    threshold: int,
) -> dict:
    """
    Mail the administrator that a stock unit dropped to the low stock threshold.

    Args:
        product_id: Product UUID as a string
        variant_id: Variant UUID as a string, or None for simple products
        current_stock: Stock left after the order that triggered the alert
        threshold: Threshold in effect when the order was placed

    Returns:
        Result dictionary
    """
    config = CheckoutConfig.from_provider(DjangoSettingsConfigProvider())
    recipient = config.lowstock_notification_email
    if not recipient:
        logger.warning(f"Low stock alert for {product_id}/{variant_id} skipped: no recipient configured")
        return {'sent': False, 'reason': 'no_recipient'}

    name = describe_stock_unit(product_id, variant_id)
    if name is None:
        logger.warning(f"Low stock alert for {product_id}/{variant_id} skipped: stock unit no longer exists")
        return {'sent': False, 'reason': 'not_found'}

    subject = f"Low Stock Alert: {name}"
    body = (
        f"{name} is running low.\n\n"
        f"Current stock: {current_stock}\n"
        f"Low stock threshold: {threshold}\n"
    )
    try:
        send_mail(subject, body, settings.DEFAULT_FROM_EMAIL, [recipient])
    except Exception as e:
        logger.error(f"Error sending low stock notification for {name}: {str(e)}", exc_info=True)
        return {'sent': False, 'reason': 'mail_error'}

    logger.info(f"Low stock alert sent to {recipient} for {name} (stock {current_stock})")
    return {'sent': True, 'recipient': recipient}
