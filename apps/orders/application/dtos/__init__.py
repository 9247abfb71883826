# DTOs
from .order_dto import CheckoutDTO, OrderDTO, OrderItemDTO

__all__ = ['CheckoutDTO', 'OrderDTO', 'OrderItemDTO']
