"""Cart and wishlist routes (mounted under ``/api/``)."""

from django.urls import path

from . import views

urlpatterns = [
    path('cart/', views.CartView.as_view(), name='cart'),
    path('cart/clear/', views.ClearCartView.as_view(), name='cart-clear'),
    path('wishlist/', views.WishlistView.as_view(), name='wishlist'),
]
