# Django models
from .order_model import OrderModel, OrderItemModel
from .cart_model import CartModel, CartItemModel

__all__ = ['OrderModel', 'OrderItemModel', 'CartModel', 'CartItemModel']
