"""
Order arithmetic tests.
"""
import uuid
from decimal import Decimal

import pytest

from apps.orders.domain.entities import Order
from apps.orders.domain.value_objects import Address, CartLine, ContactInfo, OrderNumber, OrderTotals


def _line(price, quantity, name='Item'):
    return CartLine(
        product_id=uuid.uuid4(),
        quantity=quantity,
        unit_price=Decimal(price),
        display_name=name,
    )


@pytest.fixture
def lines():
    return [_line('19.99', 2, 'Mug'), _line('5.00', 1, 'Coaster')]


class TestOrderTotals:

    def test_exact_totals_are_not_rounded(self, lines):
        totals = OrderTotals.calculate(lines, Decimal('0.10'), Decimal('10.00'))

        assert totals.subtotal == Decimal('44.98')
        assert totals.tax == Decimal('4.498')
        assert totals.shipping == Decimal('10.00')
        assert totals.total == Decimal('59.478')

    def test_rounded_quantizes_components_once(self, lines):
        stored = OrderTotals.calculate(lines, Decimal('0.10'), Decimal('10.00')).rounded()

        assert stored.subtotal == Decimal('44.98')
        assert stored.tax == Decimal('4.50')
        assert stored.total == Decimal('59.48')
        assert stored.total == stored.subtotal + stored.tax + stored.shipping

    def test_half_cent_rounds_up(self):
        totals = OrderTotals.calculate([_line('0.05', 1)], Decimal('0.10'), Decimal('0'))

        assert totals.rounded().tax == Decimal('0.01')

    def test_zero_tax_and_shipping(self, lines):
        stored = OrderTotals.calculate(lines, Decimal('0'), Decimal('0')).rounded()

        assert stored.total == Decimal('44.98')


class TestOrderPlace:

    def test_items_carry_line_subtotals(self, lines, address_data):
        address = Address.from_dict(address_data)
        totals = OrderTotals.calculate(lines, Decimal('0.10'), Decimal('10.00'))

        order = Order.place(
            customer_id=None,
            contact=ContactInfo(email='guest@example.com'),
            billing_address=address,
            shipping_address=address,
            lines=lines,
            totals=totals,
            order_number=OrderNumber(value='ORD-20260101-AAAAAAAA'),
        )

        assert [item.line_subtotal for item in order.items] == [Decimal('39.98'), Decimal('5.00')]
        assert all(item.order_id == order.id for item in order.items)
        assert order.tax == Decimal('4.50')
        assert order.total == Decimal('59.48')
        assert order.item_count == 3
        assert order.is_guest
        assert order.domain_events == []

    def test_mark_placed_records_final_order_number(self, lines, address_data):
        address = Address.from_dict(address_data)
        order = Order.place(
            customer_id=None,
            contact=ContactInfo(email='guest@example.com'),
            billing_address=address,
            shipping_address=address,
            lines=lines,
            totals=OrderTotals.calculate(lines, Decimal('0.10'), Decimal('10.00')),
            order_number=OrderNumber(value='ORD-20260101-AAAAAAAA'),
        )
        order.assign_order_number(OrderNumber(value='ORD-20260101-BBBBBBBB'))

        order.mark_placed()

        events = order.pull_domain_events()
        assert len(events) == 1
        assert events[0].order_number == 'ORD-20260101-BBBBBBBB'
        assert events[0].total == Decimal('59.48')
        assert order.pull_domain_events() == []
