# Django models
from .product_model import (
    AttributeModel,
    ProductModel,
    ProductVariantModel,
    VariantAttributeValueModel,
)

__all__ = ['ProductModel', 'ProductVariantModel', 'AttributeModel', 'VariantAttributeValueModel']
