# Django models
from .customer_model import CustomerModel

__all__ = ['CustomerModel']
