"""
Cart Django ORM models.
"""
import uuid

from django.db import models


class CartModel(models.Model):
    """Persistent cart of a registered customer."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    customer = models.OneToOneField(
        'customers.CustomerModel',
        on_delete=models.CASCADE,
        related_name='cart',
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'shopping_carts'

    def __str__(self):
        return f"Cart for customer {self.customer_id}"


class CartItemModel(models.Model):
    """Cart item model."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    cart = models.ForeignKey(CartModel, on_delete=models.CASCADE, related_name='items')
    product = models.ForeignKey('catalog.ProductModel', on_delete=models.CASCADE, related_name='cart_items')
    variant = models.ForeignKey(
        'catalog.ProductVariantModel',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='cart_items',
    )
    quantity = models.PositiveIntegerField(default=1)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'cart_product'
        unique_together = ['cart', 'product', 'variant']
        ordering = ['created_at']

    def __str__(self):
        return f"{self.product_id} x {self.quantity}"
