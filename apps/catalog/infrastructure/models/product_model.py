"""
Catalog Django ORM models.
"""
import uuid

from django.db import models


class ProductModel(models.Model):
    """Product model. ``stock`` is NULL when the product does not track inventory."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, db_index=True)
    slug = models.SlugField(max_length=255, unique=True)
    sku = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True)
    price = models.DecimalField(max_digits=12, decimal_places=2)
    stock = models.PositiveIntegerField(null=True, blank=True)
    is_active = models.BooleanField(default=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.sku})"


class AttributeModel(models.Model):
    """Variant attribute such as Color or Size."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True)

    class Meta:
        db_table = 'attributes'
        ordering = ['name']

    def __str__(self):
        return self.name


class ProductVariantModel(models.Model):
    """Product variant with its own price and stock."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey(ProductModel, on_delete=models.CASCADE, related_name='variants')
    sku = models.CharField(max_length=100, unique=True)
    price = models.DecimalField(max_digits=12, decimal_places=2)
    stock = models.PositiveIntegerField(null=True, blank=True)
    is_active = models.BooleanField(default=True, db_index=True)
    attributes = models.ManyToManyField(
        AttributeModel,
        through='VariantAttributeValueModel',
        related_name='variants',
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'product_variants'
        ordering = ['sku']

    def __str__(self):
        return f"{self.product.name} - {self.sku}"

    @property
    def variant_name(self) -> str:
        """Flattened attribute description, e.g. "Color: Red, Size: M"."""
        values = sorted(self.attribute_values.all(), key=lambda value: value.attribute.name)
        return ', '.join(f"{value.attribute.name}: {value.value}" for value in values)


class VariantAttributeValueModel(models.Model):
    """Value of one attribute for one variant."""

    variant = models.ForeignKey(
        ProductVariantModel,
        on_delete=models.CASCADE,
        related_name='attribute_values',
    )
    attribute = models.ForeignKey(AttributeModel, on_delete=models.CASCADE)
    value = models.CharField(max_length=100)

    class Meta:
        db_table = 'attribute_variant'
        unique_together = ['variant', 'attribute']

    def __str__(self):
        return f"{self.attribute.name}: {self.value}"
