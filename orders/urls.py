"""Order and payment routes (mounted under ``/api/``)."""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from . import views

router = DefaultRouter(trailing_slash=True)
router.include_root_view = False
router.register(r'admin/orders', views.AdminOrderViewSet, basename='admin-order')

urlpatterns = [
    path('orders/', views.OrderListView.as_view(), name='order-list'),
    path('orders/create/', views.OrderCreateView.as_view(), name='order-create'),
    path('orders/cancel/', views.OrderCancelView.as_view(), name='order-cancel'),
    path('orders/<str:order_id>/', views.OrderDetailView.as_view(), name='order-detail'),
    path('payment/create-order/', views.create_payment_order, name='payment-create-order'),
    path('', include(router.urls)),
]
