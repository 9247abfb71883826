"""
Checkout API tests.
"""
import pytest
from django.urls import reverse
from rest_framework import status

from apps.orders.infrastructure.models import CartItemModel, OrderModel


@pytest.fixture
def checkout_payload(address_data):
    return {
        'email': 'guest@example.com',
        'phone': '+1 555 0199',
        'billing_address': address_data,
        'shipping_address': address_data,
    }


@pytest.mark.django_db
class TestCheckoutAPI:

    def test_guest_checkout(self, api_client, make_product, checkout_payload):
        mug = make_product(name='Mug', price='19.99', stock=10)
        coaster = make_product(name='Coaster', price='5.00', stock=10)
        checkout_payload['items'] = [
            {'product_id': str(mug.id), 'quantity': 2},
            {'product_id': str(coaster.id), 'quantity': 1},
        ]

        response = api_client.post(reverse('order-checkout'), checkout_payload, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['order_number'].startswith('ORD-')
        assert response.data['status'] == 'pending'
        assert response.data['subtotal'] == '44.98'
        assert response.data['tax'] == '4.50'
        assert response.data['shipping'] == '10.00'
        assert response.data['total'] == '59.48'
        assert response.data['item_count'] == 3
        assert response.data['shipping_address']['city'] == 'Springfield'
        assert len(response.data['items']) == 2
        mug.refresh_from_db()
        assert mug.stock == 8

    def test_insufficient_stock_returns_conflict(self, api_client, make_product, checkout_payload):
        lamp = make_product(name='Lamp', stock=1)
        checkout_payload['items'] = [{'product_id': str(lamp.id), 'quantity': 3}]

        response = api_client.post(reverse('order-checkout'), checkout_payload, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['code'] == 'INSUFFICIENT_STOCK'
        assert response.data['shortages'] == [
            {
                'product_id': str(lamp.id),
                'variant_id': None,
                'product_name': 'Lamp',
                'requested': 3,
                'available': 1,
            }
        ]
        assert OrderModel.objects.count() == 0

    def test_guest_without_items(self, api_client, checkout_payload):
        response = api_client.post(reverse('order-checkout'), checkout_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'EMPTY_CART'

    def test_unknown_product(self, api_client, checkout_payload):
        checkout_payload['items'] = [{'product_id': '8d3c1c1e-0000-4000-8000-000000000000', 'quantity': 1}]

        response = api_client.post(reverse('order-checkout'), checkout_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['field'] == 'items'

    def test_missing_address_field(self, api_client, make_product, checkout_payload):
        product = make_product()
        checkout_payload['items'] = [{'product_id': str(product.id), 'quantity': 1}]
        del checkout_payload['billing_address']['city']

        response = api_client.post(reverse('order-checkout'), checkout_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'billing_address' in response.data

    def test_customer_checks_out_persistent_cart(
        self, api_client, customer, fill_cart, make_product, checkout_payload
    ):
        lamp = make_product(name='Lamp', price='30.00', stock=5)
        fill_cart(customer, (lamp, None, 1))
        api_client.force_authenticate(user=customer.user)

        response = api_client.post(reverse('order-checkout'), checkout_payload, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['total'] == '43.00'
        assert OrderModel.objects.get(order_number=response.data['order_number']).customer_id == customer.id
        assert not CartItemModel.objects.filter(cart__customer=customer).exists()

    def test_customer_posting_items_keeps_persistent_cart(
        self, api_client, customer, fill_cart, make_product, checkout_payload
    ):
        lamp = make_product(name='Lamp', price='30.00', stock=5)
        mug = make_product(name='Mug', price='19.99', stock=10)
        fill_cart(customer, (lamp, None, 1))
        api_client.force_authenticate(user=customer.user)
        checkout_payload['items'] = [{'product_id': str(mug.id), 'quantity': 1}]

        response = api_client.post(reverse('order-checkout'), checkout_payload, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert [item['product_name'] for item in response.data['items']] == ['Mug']
        assert OrderModel.objects.get(order_number=response.data['order_number']).customer_id == customer.id
        assert CartItemModel.objects.filter(cart__customer=customer, product=lamp).exists()
        customer.refresh_from_db()
        assert customer.default_shipping_address['city'] == 'Springfield'
        lamp.refresh_from_db()
        assert lamp.stock == 5


@pytest.mark.django_db
class TestOrderDetailAPI:

    def test_get_order(self, api_client, commit_service, make_product, cart_line, contact_data, address_data):
        product = make_product(name='Mug', price='19.99', stock=10)
        order = commit_service.commit(None, contact_data, address_data, address_data, [cart_line(product, 2)])

        response = api_client.get(reverse('order-detail', args=[order.order_number.value]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == str(order.id)
        assert response.data['items'][0]['product_name'] == 'Mug'
        assert response.data['items'][0]['line_subtotal'] == '39.98'

    def test_unknown_order(self, api_client):
        response = api_client.get(reverse('order-detail', args=['ORD-20260101-NOPE0000']))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['code'] == 'ENTITY_NOT_FOUND'


@pytest.mark.django_db
def test_health(api_client):
    response = api_client.get(reverse('health'))

    assert response.status_code == status.HTTP_200_OK
    assert response.data == {'status': 'healthy'}
