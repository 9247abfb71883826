"""
Catalog admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.product_model import (
    AttributeModel,
    ProductModel,
    ProductVariantModel,
    VariantAttributeValueModel,
)


class ProductVariantInline(admin.TabularInline):
    """Inline for product variants."""
    model = ProductVariantModel
    extra = 0
    fields = ('sku', 'price', 'stock', 'is_active')


@admin.register(ProductModel)
class ProductAdmin(admin.ModelAdmin):
    """Admin configuration for Product model."""
    list_display = ('name', 'sku', 'price', 'stock', 'is_active')
    list_filter = ('is_active',)
    search_fields = ('name', 'sku')
    prepopulated_fields = {'slug': ('name',)}
    inlines = [ProductVariantInline]


class VariantAttributeValueInline(admin.TabularInline):
    """Inline for variant attribute values."""
    model = VariantAttributeValueModel
    extra = 0


@admin.register(ProductVariantModel)
class ProductVariantAdmin(admin.ModelAdmin):
    """Admin configuration for ProductVariant model."""
    list_display = ('sku', 'product', 'price', 'stock', 'is_active')
    list_filter = ('is_active',)
    search_fields = ('sku', 'product__name')
    inlines = [VariantAttributeValueInline]


@admin.register(AttributeModel)
class AttributeAdmin(admin.ModelAdmin):
    """Admin configuration for Attribute model."""
    list_display = ('name',)
    search_fields = ('name',)
