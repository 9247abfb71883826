"""
Checkout configuration.

Tunables are read through a ``ConfigProvider`` and collected into a typed
``CheckoutConfig``; callers never see raw strings.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

logger = logging.getLogger(__name__)


class ConfigProvider(ABC):
    """Key/value source for checkout tunables."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the raw value for key, or None when it is not set."""


@dataclass(frozen=True)
class CheckoutConfig:
    """Typed checkout settings with defaults applied."""
    tax_rate: Decimal = Decimal('0.10')
    flat_shipping_fee: Decimal = Decimal('10.00')
    lowstock_threshold: int = 2
    lowstock_notification_email: Optional[str] = None
    order_number_max_attempts: int = 5

    @classmethod
    def from_provider(cls, provider: ConfigProvider) -> 'CheckoutConfig':
        defaults = cls()
        return cls(
            tax_rate=_decimal(provider, 'tax_rate', defaults.tax_rate),
            flat_shipping_fee=_decimal(provider, 'flat_shipping_fee', defaults.flat_shipping_fee),
            lowstock_threshold=_integer(provider, 'lowstock_threshold', defaults.lowstock_threshold),
            lowstock_notification_email=provider.get('lowstock_notification_email') or None,
            order_number_max_attempts=max(
                1,
                _integer(provider, 'order_number_max_attempts', defaults.order_number_max_attempts),
            ),
        )


def _decimal(provider: ConfigProvider, key: str, default: Decimal) -> Decimal:
    raw = provider.get(key)
    if raw is None or raw == '':
        return default
    try:
        return Decimal(str(raw))
    except InvalidOperation:
        logger.warning(f"Ignoring malformed config value {key}={raw!r}, using {default}")
        return default


def _integer(provider: ConfigProvider, key: str, default: int) -> int:
    raw = provider.get(key)
    if raw is None or raw == '':
        return default
    try:
        return int(raw)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring malformed config value {key}={raw!r}, using {default}")
        return default
