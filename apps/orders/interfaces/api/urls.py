"""
Orders API URLs.
"""
from django.urls import path, include

urlpatterns = [
    path('v1/orders/', include('apps.orders.interfaces.api.v1.urls')),
]
