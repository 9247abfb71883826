"""
Django ORM implementation of CartRepository.
"""
from typing import List, Sequence
from uuid import UUID

from apps.catalog.infrastructure.models import ProductModel, ProductVariantModel
from shared.domain.exceptions import ValidationError
from ...domain.repositories.cart_repository import CartItemRequest, CartRepository
from ...domain.value_objects.cart_line import CartLine
from ..models.cart_model import CartItemModel


class DjangoCartRepository(CartRepository):
    """Django ORM based cart repository implementation."""

    def get_lines(self, customer_id: UUID) -> List[CartLine]:
        items = (
            CartItemModel.objects.filter(cart__customer_id=customer_id)
            .select_related('product', 'variant')
            .prefetch_related('variant__attribute_values__attribute')
        )
        return [
            self._to_line(item.product, item.variant, item.quantity)
            for item in items
        ]

    def build_lines(self, requests: Sequence[CartItemRequest]) -> List[CartLine]:
        product_ids = {request.product_id for request in requests}
        variant_ids = {request.variant_id for request in requests if request.variant_id}
        products = ProductModel.objects.in_bulk(product_ids)
        variants = ProductVariantModel.objects.in_bulk(variant_ids)

        lines = []
        for request in requests:
            product = products.get(request.product_id)
            if product is None:
                raise ValidationError(message=f"Unknown product '{request.product_id}'", field="items")
            variant = None
            if request.variant_id:
                variant = variants.get(request.variant_id)
                if variant is None or variant.product_id != product.id:
                    raise ValidationError(
                        message=f"Unknown variant '{request.variant_id}' for product '{product.id}'",
                        field="items",
                    )
            lines.append(self._to_line(product, variant, request.quantity))
        return lines

    def clear(self, customer_id: UUID) -> None:
        CartItemModel.objects.filter(cart__customer_id=customer_id).delete()

    def _to_line(self, product: ProductModel, variant, quantity: int) -> CartLine:
        """Price comes from the variant when there is one."""
        return CartLine(
            product_id=product.id,
            variant_id=variant.id if variant else None,
            quantity=quantity,
            unit_price=variant.price if variant else product.price,
            display_name=product.name,
            variant_name=(variant.variant_name or None) if variant else None,
        )
