"""Purchasing API routes (mounted under ``/api/``)."""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import InvoiceViewSet, WholesalerViewSet

router = DefaultRouter()
router.include_root_view = False
router.register(r'admin/wholesalers', WholesalerViewSet, basename='admin-wholesaler')
router.register(r'admin/invoices', InvoiceViewSet, basename='admin-invoice')

urlpatterns = [
    path('', include(router.urls)),
]
