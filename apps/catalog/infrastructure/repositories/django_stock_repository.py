"""
Django ORM implementation of StockRepository.
"""
from django.db.models import F

from ...domain.exceptions import StockUnitNotFoundError
from ...domain.repositories.stock_repository import StockRepository
from ...domain.value_objects.stock_level import StockLevel
from ...domain.value_objects.stock_unit_ref import StockUnitRef
from ..models.product_model import ProductModel, ProductVariantModel


class DjangoStockRepository(StockRepository):
    """Stock access through SELECT ... FOR UPDATE and F() updates."""

    def lock_and_read_stock(self, stock_unit: StockUnitRef) -> StockLevel:
        row = (
            self._queryset(stock_unit)
            .select_for_update()
            .filter(is_active=True)
            .values_list('id', 'stock')
            .first()
        )
        if row is None:
            raise StockUnitNotFoundError(stock_unit)
        return StockLevel(quantity=row[1])

    def decrement_stock(self, stock_unit: StockUnitRef, amount: int) -> None:
        # Untracked rows are excluded by the stock__isnull filter.
        self._queryset(stock_unit).filter(stock__isnull=False).update(
            stock=F('stock') - amount
        )

    def _queryset(self, stock_unit: StockUnitRef):
        if stock_unit.is_variant:
            return ProductVariantModel.objects.filter(
                id=stock_unit.variant_id,
                product_id=stock_unit.product_id,
            )
        return ProductModel.objects.filter(id=stock_unit.product_id)
