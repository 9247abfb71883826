"""
Catalog domain exceptions.
"""
from shared.domain.exceptions import EntityNotFoundError


class StockUnitNotFoundError(EntityNotFoundError):
    """Raised when the product or variant behind a cart line no longer exists."""

    def __init__(self, stock_unit):
        entity = "ProductVariant" if stock_unit.is_variant else "Product"
        entity_id = stock_unit.variant_id if stock_unit.is_variant else stock_unit.product_id
        super().__init__(entity_name=entity, entity_id=str(entity_id))
        self.stock_unit = stock_unit
