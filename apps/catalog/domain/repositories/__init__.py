# Repository interfaces
from .stock_repository import StockRepository

__all__ = ['StockRepository']
