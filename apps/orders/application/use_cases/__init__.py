# Use cases
from .get_order import GetOrderUseCase
from .place_order import PlaceOrderUseCase

__all__ = ['GetOrderUseCase', 'PlaceOrderUseCase']
