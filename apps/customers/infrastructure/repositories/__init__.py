# Repository implementations
from .django_customer_repository import DjangoCustomerRepository

__all__ = ['DjangoCustomerRepository']
