# Repository implementations
from .django_stock_repository import DjangoStockRepository

__all__ = ['DjangoStockRepository']
