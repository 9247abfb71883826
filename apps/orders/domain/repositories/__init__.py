# Repository interfaces
from .cart_repository import CartItemRequest, CartRepository
from .order_repository import OrderNumberTaken, OrderRepository

__all__ = ['OrderRepository', 'OrderNumberTaken', 'CartRepository', 'CartItemRequest']
