"""
Customers admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.customer_model import CustomerModel


@admin.register(CustomerModel)
class CustomerAdmin(admin.ModelAdmin):
    """Admin configuration for Customer model."""
    list_display = ('name', 'email', 'phone', 'created_at')
    search_fields = ('name', 'email')
    ordering = ('-created_at',)
    readonly_fields = ('id', 'created_at', 'updated_at')
