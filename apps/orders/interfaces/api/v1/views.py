"""
Orders API v1 views.
"""
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.customers.infrastructure.repositories import DjangoCustomerRepository
from ....application.dtos.order_dto import CheckoutDTO
from ....domain.repositories.cart_repository import CartItemRequest
from ....infrastructure.container import build_get_order_use_case, build_place_order_use_case
from ...serializers.order_serializer import CheckoutSerializer, OrderSerializer


@extend_schema(tags=['Orders'])
class CheckoutView(APIView):
    """Checkout endpoint. Guests post items; customers check out their cart."""
    permission_classes = [AllowAny]

    @extend_schema(
        request=CheckoutSerializer,
        responses={201: OrderSerializer},
        summary="Place an order",
    )
    def post(self, request):
        serializer = CheckoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        customer_id = None
        if request.user and request.user.is_authenticated:
            customer_id = DjangoCustomerRepository().find_id_by_user(request.user.pk)

        result = build_place_order_use_case().execute(
            CheckoutDTO(
                email=data['email'],
                phone=data.get('phone') or None,
                billing_address=dict(data['billing_address']),
                shipping_address=dict(data['shipping_address']),
                customer_id=customer_id,
                items=[
                    CartItemRequest(
                        product_id=item['product_id'],
                        variant_id=item.get('variant_id'),
                        quantity=item['quantity'],
                    )
                    for item in data.get('items', [])
                ],
            )
        )
        status_code = status.HTTP_201_CREATED if result.created else status.HTTP_200_OK
        return Response(OrderSerializer(result.data).data, status=status_code)


@extend_schema(tags=['Orders'])
class OrderDetailView(APIView):
    """Order confirmation endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: OrderSerializer},
        summary="Get order by order number",
    )
    def get(self, request, order_number: str):
        result = build_get_order_use_case().execute(order_number)
        return Response(OrderSerializer(result.data).data)
