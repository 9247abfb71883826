"""
Django ORM implementation of OrderRepository.
"""
from decimal import Decimal
from typing import Optional

from django.db import IntegrityError, transaction

from ...domain.entities.order import Order
from ...domain.entities.order_item import OrderItem
from ...domain.repositories.order_repository import OrderNumberTaken, OrderRepository
from ...domain.value_objects.address import Address
from ...domain.value_objects.contact_info import ContactInfo
from ...domain.value_objects.order_number import OrderNumber
from ...domain.value_objects.order_status import OrderStatus
from ..models.order_model import OrderItemModel, OrderModel


class DjangoOrderRepository(OrderRepository):
    """Django ORM based order repository implementation."""

    def add(self, order: Order) -> None:
        try:
            # Savepoint, so a duplicate number leaves the outer transaction usable.
            with transaction.atomic():
                OrderModel.objects.create(
                    id=order.id,
                    order_number=order.order_number.value,
                    customer_id=order.customer_id,
                    status=order.status.value,
                    subtotal=order.subtotal,
                    tax=order.tax,
                    shipping=order.shipping,
                    total=order.total,
                    email=order.contact.email,
                    phone=order.contact.phone,
                    billing_address=order.billing_address.to_dict(),
                    shipping_address=order.shipping_address.to_dict(),
                )
        except IntegrityError as e:
            if 'order_number' in str(e):
                raise OrderNumberTaken(order.order_number.value) from e
            raise

    def add_item(self, item: OrderItem) -> None:
        OrderItemModel.objects.create(
            id=item.id,
            order_id=item.order_id,
            product_id=item.product_id,
            variant_id=item.variant_id,
            product_name=item.product_name,
            variant_name=item.variant_name,
            quantity=item.quantity,
            unit_price=item.unit_price,
            line_subtotal=item.line_subtotal,
        )

    def find_by_order_number(self, order_number: str) -> Optional[Order]:
        try:
            model = OrderModel.objects.prefetch_related('items').get(order_number=order_number)
            return self._to_entity(model)
        except OrderModel.DoesNotExist:
            return None

    def _to_entity(self, model: OrderModel) -> Order:
        """Convert Django model to domain entity."""
        return Order(
            id=model.id,
            order_number=OrderNumber(value=model.order_number),
            customer_id=model.customer_id,
            contact=ContactInfo(email=model.email, phone=model.phone),
            billing_address=Address(**model.billing_address),
            shipping_address=Address(**model.shipping_address),
            subtotal=Decimal(str(model.subtotal)),
            tax=Decimal(str(model.tax)),
            shipping=Decimal(str(model.shipping)),
            total=Decimal(str(model.total)),
            status=OrderStatus(model.status),
            items=[self._item_to_entity(item) for item in model.items.all()],
            created_at=model.created_at,
        )

    def _item_to_entity(self, model: OrderItemModel) -> OrderItem:
        return OrderItem(
            id=model.id,
            order_id=model.order_id,
            product_id=model.product_id,
            variant_id=model.variant_id,
            product_name=model.product_name,
            variant_name=model.variant_name,
            quantity=model.quantity,
            unit_price=Decimal(str(model.unit_price)),
            line_subtotal=Decimal(str(model.line_subtotal)),
            created_at=model.created_at,
        )
