"""
Order commit service.

Turns a cart snapshot into a persisted order while reserving stock, in one
database transaction. Stock read while assembling the cart is advisory; the
oversell decision is made only on stock re-read under a row lock.
"""
import logging
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union
from uuid import UUID

from django.db import DatabaseError, transaction

from apps.catalog.domain.events import LowStockDetected
from apps.catalog.domain.exceptions import StockUnitNotFoundError
from apps.catalog.domain.repositories import StockRepository
from apps.catalog.domain.services import LowStockNotifier
from apps.catalog.domain.value_objects import StockLevel, StockUnitRef
from apps.customers.domain.repositories import CustomerRepository
from shared.application.config import CheckoutConfig, ConfigProvider
from shared.domain import DomainEvent, InsufficientStockError, PersistenceError, StockShortage
from ...domain.entities.order import Order
from ...domain.entities.order_item import OrderItem
from ...domain.events.order_placed import OrderPlaced
from ...domain.exceptions import EmptyCartError, OrderNumberCollisionError
from ...domain.repositories.cart_repository import CartRepository
from ...domain.repositories.order_repository import OrderNumberTaken, OrderRepository
from ...domain.value_objects.address import Address
from ...domain.value_objects.cart_line import CartLine
from ...domain.value_objects.contact_info import ContactInfo
from ...domain.value_objects.order_number import OrderNumber
from ...domain.value_objects.order_totals import OrderTotals

logger = logging.getLogger(__name__)

ContactInput = Union[ContactInfo, Mapping[str, Any]]
AddressInput = Union[Address, Mapping[str, Any]]


@dataclass
class OrderCommitService:
    """Places orders without overselling."""

    order_repository: OrderRepository
    cart_repository: CartRepository
    stock_repository: StockRepository
    customer_repository: CustomerRepository
    notifier: LowStockNotifier
    config_provider: ConfigProvider
    order_number_factory: Callable[[], OrderNumber] = field(default=OrderNumber.generate)

    def place_order(
        self,
        customer_id: UUID,
        contact: ContactInput,
        billing_address: AddressInput,
        shipping_address: AddressInput,
    ) -> Order:
        """Check out a registered customer's persistent cart."""
        cart_lines = self.cart_repository.get_lines(customer_id)
        return self.commit(
            customer_id, contact, billing_address, shipping_address, cart_lines, clear_cart=True
        )

    def commit(
        self,
        customer_id: Optional[UUID],
        contact: ContactInput,
        billing_address: AddressInput,
        shipping_address: AddressInput,
        cart_lines: Sequence[CartLine],
        clear_cart: bool = False,
    ) -> Order:
        """
        Persist an order for the cart lines and decrement their stock atomically.

        Args:
            customer_id: Registered customer, or None for a guest checkout
            contact: Email (required) and phone
            billing_address: Structured billing address
            shipping_address: Structured shipping address
            cart_lines: Lines with resolved unit prices
            clear_cart: Empty the customer's persistent cart; only when the lines were read from it

        Returns:
            The stored order

        Raises:
            EmptyCartError: If there are no cart lines
            ValidationError: If the contact info or an address is malformed
            InsufficientStockError: If any line asks for more than the locked stock holds
            OrderNumberCollisionError: If no unique order number could be allocated
            PersistenceError: If the datastore failed; nothing was stored
        """
        if not cart_lines:
            raise EmptyCartError()
        contact = self._contact(contact)
        billing = self._address(billing_address, 'billing_address')
        shipping = self._address(shipping_address, 'shipping_address')

        config = CheckoutConfig.from_provider(self.config_provider)
        # Fixed global lock order: ascending (product_id, variant_id).
        lines = sorted(cart_lines, key=lambda line: line.stock_unit.sort_key)
        totals = OrderTotals.calculate(lines, config.tax_rate, config.flat_shipping_fee)
        order = Order.place(
            customer_id=customer_id,
            contact=contact,
            billing_address=billing,
            shipping_address=shipping,
            lines=lines,
            totals=totals,
            order_number=self.order_number_factory(),
        )

        try:
            with transaction.atomic():
                self._insert_order(order, config.order_number_max_attempts)
                remaining = self._insert_items_and_reserve_stock(order)
                if customer_id is not None:
                    self._save_default_addresses(order)
                    if clear_cart:
                        self.cart_repository.clear(customer_id)
                order.mark_placed()
                events = order.pull_domain_events() + self._low_stock_events(
                    remaining, config.lowstock_threshold
                )
                transaction.on_commit(partial(self._publish, events), robust=True)
        except InsufficientStockError as e:
            logger.warning(f"Order rejected, {e.message}")
            raise
        except DatabaseError as e:
            logger.error(f"Order commit failed: {str(e)}", exc_info=True)
            raise PersistenceError() from e

        logger.info(
            f"Order {order.order_number} placed: {order.item_count} items, "
            f"subtotal {order.subtotal}, tax {order.tax}, shipping {order.shipping}, total {order.total}"
        )
        return order

    def _contact(self, contact: ContactInput) -> ContactInfo:
        if isinstance(contact, ContactInfo):
            return contact
        contact = contact or {}
        return ContactInfo(email=contact.get('email'), phone=contact.get('phone'))

    def _address(self, address: AddressInput, prefix: str) -> Address:
        if isinstance(address, Address):
            return address
        return Address.from_dict(address, prefix=prefix)

    def _insert_order(self, order: Order, max_attempts: int) -> None:
        for attempt in range(1, max_attempts + 1):
            try:
                self.order_repository.add(order)
                return
            except OrderNumberTaken:
                logger.warning(
                    f"Order number {order.order_number} already taken "
                    f"(attempt {attempt}/{max_attempts})"
                )
                if attempt < max_attempts:
                    order.assign_order_number(self.order_number_factory())
        raise OrderNumberCollisionError(max_attempts)

    def _insert_items_and_reserve_stock(self, order: Order) -> Dict[StockUnitRef, StockLevel]:
        """
        Store each item, then lock its stock unit and decrement it.

        Every line is checked so that all shortages can be reported together.

        Returns:
            Post-decrement level of each tracked stock unit
        """
        shortages: List[StockShortage] = []
        remaining: Dict[StockUnitRef, StockLevel] = {}

        for item in order.items:
            self.order_repository.add_item(item)
            stock_unit = item.stock_unit
            try:
                level = self.stock_repository.lock_and_read_stock(stock_unit)
            except StockUnitNotFoundError:
                shortages.append(self._shortage(item, available=0))
                continue

            if not level.can_fulfil(item.quantity):
                shortages.append(self._shortage(item, available=level.available))
                continue
            if shortages or not level.is_tracked:
                continue

            self.stock_repository.decrement_stock(stock_unit, item.quantity)
            remaining[stock_unit] = level.decreased_by(item.quantity)

        if shortages:
            raise InsufficientStockError(shortages)
        return remaining

    def _shortage(self, item: OrderItem, available: int) -> StockShortage:
        return StockShortage(
            product_id=item.product_id,
            variant_id=item.variant_id,
            product_name=item.product_name,
            requested=item.quantity,
            available=available,
        )

    def _save_default_addresses(self, order: Order) -> None:
        """Best effort; a failure here never aborts the order."""
        try:
            with transaction.atomic():
                updated = self.customer_repository.update_default_addresses(
                    order.customer_id,
                    shipping_address=order.shipping_address.to_dict(),
                    billing_address=order.billing_address.to_dict(),
                )
        except DatabaseError as e:
            logger.error(f"Could not save default addresses for customer {order.customer_id}: {str(e)}", exc_info=True)
            return
        if not updated:
            logger.warning(f"Customer {order.customer_id} not found, default addresses not saved")

    def _low_stock_events(
        self,
        remaining: Dict[StockUnitRef, StockLevel],
        threshold: int,
    ) -> List[LowStockDetected]:
        return [
            LowStockDetected(stock_unit=stock_unit, current_stock=level.quantity, threshold=threshold)
            for stock_unit, level in remaining.items()
            if level.is_low(threshold)
        ]

    def _publish(self, events: List[DomainEvent]) -> None:
        """Runs after commit. Failures are logged and never reach the caller."""
        for event in events:
            try:
                if isinstance(event, LowStockDetected):
                    self.notifier.notify_low_stock(event.stock_unit, event.current_stock, event.threshold)
                elif isinstance(event, OrderPlaced):
                    logger.info(f"{event.event_type}: {event.order_number} total {event.total}")
            except Exception as e:
                logger.error(f"Failed to publish {event.event_type}: {str(e)}", exc_info=True)
