"""
Low stock alert task tests.
"""
import pytest
from django.core import mail

from apps.catalog.tasks import describe_stock_unit, send_low_stock_alert
from apps.orders.infrastructure.container import build_order_commit_service


@pytest.mark.django_db
class TestSendLowStockAlert:

    def test_mails_configured_recipient(self, make_product):
        product = make_product(name='Desk Lamp', stock=2)

        result = send_low_stock_alert(str(product.id), None, 2, 2)

        assert result == {'sent': True, 'recipient': 'stock@example.com'}
        assert len(mail.outbox) == 1
        message = mail.outbox[0]
        assert message.subject == 'Low Stock Alert: Desk Lamp'
        assert message.to == ['stock@example.com']
        assert 'Current stock: 2' in message.body
        assert 'Low stock threshold: 2' in message.body

    def test_variant_is_described_by_its_attributes(self, make_product, make_variant):
        shirt = make_product(name='Shirt')
        variant = make_variant(shirt, attributes={'Size': 'L', 'Color': 'Green'})

        assert describe_stock_unit(str(shirt.id), str(variant.id)) == 'Shirt (Color: Green, Size: L)'

    def test_skipped_without_recipient(self, settings, make_product):
        settings.CHECKOUT = {**settings.CHECKOUT, 'LOWSTOCK_NOTIFICATION_EMAIL': None}
        product = make_product(stock=1)

        result = send_low_stock_alert(str(product.id), None, 1, 2)

        assert result == {'sent': False, 'reason': 'no_recipient'}
        assert mail.outbox == []

    def test_skipped_when_stock_unit_is_gone(self):
        result = send_low_stock_alert('8d3c1c1e-0000-4000-8000-000000000000', None, 0, 2)

        assert result == {'sent': False, 'reason': 'not_found'}
        assert mail.outbox == []

    def test_mail_failure_is_reported_not_raised(self, settings, make_product):
        settings.EMAIL_BACKEND = f'{__name__}.BrokenEmailBackend'
        product = make_product(stock=0)

        result = send_low_stock_alert(str(product.id), None, 0, 2)

        assert result == {'sent': False, 'reason': 'mail_error'}


class BrokenEmailBackend:

    def __init__(self, *args, **kwargs):
        pass

    def send_messages(self, messages):
        raise ConnectionRefusedError("smtp down")


@pytest.mark.django_db
def test_commit_queues_alert_after_commit(
    make_product, cart_line, contact_data, address_data, django_capture_on_commit_callbacks
):
    service = build_order_commit_service()
    product = make_product(name='Desk Lamp', stock=3)

    with django_capture_on_commit_callbacks(execute=True):
        service.commit(None, contact_data, address_data, address_data, [cart_line(product, 1)])
        assert mail.outbox == []

    assert [message.subject for message in mail.outbox] == ['Low Stock Alert: Desk Lamp']
