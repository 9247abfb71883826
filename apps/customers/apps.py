"""
Customers app configuration.
Storefront customers and their saved addresses.
"""
from django.apps import AppConfig


class CustomersConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.customers'
    label = 'customers'
    verbose_name = 'Customers'
