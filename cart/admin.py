"""Django admin configuration for cart and wishlist rows."""

from django.contrib import admin

from .models import CartItem, WishlistItem


@admin.register(CartItem)
class CartItemAdmin(admin.ModelAdmin):
    list_display = ('owner_key', 'product', 'quantity', 'subtotal', 'updated_at')
    search_fields = ('owner_key', 'product__name')
    readonly_fields = ('subtotal',)


@admin.register(WishlistItem)
class WishlistItemAdmin(admin.ModelAdmin):
    list_display = ('owner_key', 'product', 'created_at')
    search_fields = ('owner_key', 'product__name')
