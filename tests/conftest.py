"""
Pytest configuration and fixtures.
"""
import uuid
from decimal import Decimal

import pytest

from apps.catalog.domain.services import LowStockNotifier


class RecordingNotifier(LowStockNotifier):
    """Keeps low stock notifications in memory."""

    def __init__(self):
        self.calls = []

    def notify_low_stock(self, stock_unit, current_stock, threshold):
        self.calls.append((stock_unit, current_stock, threshold))


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def make_product(db):
    """Factory for catalog products; ``stock=None`` means untracked."""
    from apps.catalog.infrastructure.models import ProductModel

    def _make(name='Widget', price='19.99', stock=10, is_active=True):
        suffix = uuid.uuid4().hex[:8]
        return ProductModel.objects.create(
            name=name,
            slug=f"{name.lower().replace(' ', '-')}-{suffix}",
            sku=f"SKU-{suffix}",
            price=Decimal(price),
            stock=stock,
            is_active=is_active,
        )

    return _make


@pytest.fixture
def make_variant(db):
    """Factory for product variants with attribute values."""
    from apps.catalog.infrastructure.models import (
        AttributeModel,
        ProductVariantModel,
        VariantAttributeValueModel,
    )

    def _make(product, price='24.99', stock=5, attributes=None):
        variant = ProductVariantModel.objects.create(
            product=product,
            sku=f"VAR-{uuid.uuid4().hex[:8]}",
            price=Decimal(price),
            stock=stock,
        )
        for name, value in (attributes or {}).items():
            attribute, _ = AttributeModel.objects.get_or_create(name=name)
            VariantAttributeValueModel.objects.create(variant=variant, attribute=attribute, value=value)
        return variant

    return _make


@pytest.fixture
def customer(db, django_user_model):
    """Registered customer linked to a user account."""
    from apps.customers.infrastructure.models import CustomerModel

    user = django_user_model.objects.create_user(
        username='buyer',
        email='buyer@example.com',
        password='testpass123',
    )
    return CustomerModel.objects.create(user=user, name='Jane Buyer', email='buyer@example.com')


@pytest.fixture
def fill_cart(db):
    """Put (product, variant, quantity) entries into a customer's persistent cart."""
    from apps.orders.infrastructure.models import CartItemModel, CartModel

    def _fill(customer, *entries):
        cart, _ = CartModel.objects.get_or_create(customer=customer)
        for product, variant, quantity in entries:
            CartItemModel.objects.create(cart=cart, product=product, variant=variant, quantity=quantity)
        return cart

    return _fill


@pytest.fixture
def address_data():
    return {
        'first_name': 'Jane',
        'last_name': 'Buyer',
        'address_line_1': '12 Market Street',
        'address_line_2': 'Apt 4',
        'city': 'Springfield',
        'state': 'IL',
        'postal_code': '62701',
        'country': 'US',
    }


@pytest.fixture
def contact_data():
    return {'email': 'buyer@example.com', 'phone': '+1 555 0100'}


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def commit_service(notifier):
    """Commit service on the real ORM adapters with an in-memory notifier."""
    from apps.orders.infrastructure.container import build_order_commit_service
    return build_order_commit_service(notifier=notifier)


@pytest.fixture
def cart_line():
    """Build a CartLine for a catalog product or variant."""
    from apps.orders.domain.value_objects import CartLine

    def _line(product, quantity=1, variant=None):
        return CartLine(
            product_id=product.id,
            variant_id=variant.id if variant else None,
            quantity=quantity,
            unit_price=variant.price if variant else product.price,
            display_name=product.name,
            variant_name=variant.variant_name if variant else None,
        )

    return _line
