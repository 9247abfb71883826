"""
Orders API v1 URLs.
"""
from django.urls import path

from .views import CheckoutView, OrderDetailView

urlpatterns = [
    path('checkout/', CheckoutView.as_view(), name='order-checkout'),
    path('<str:order_number>/', OrderDetailView.as_view(), name='order-detail'),
]
