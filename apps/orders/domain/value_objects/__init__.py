# Value objects
from .address import Address
from .cart_line import CartLine
from .contact_info import ContactInfo
from .order_number import OrderNumber
from .order_status import OrderStatus
from .order_totals import OrderTotals

__all__ = ['Address', 'CartLine', 'ContactInfo', 'OrderNumber', 'OrderStatus', 'OrderTotals']
