"""Django admin configuration for orders."""

from django.contrib import admin

from .models import Order, OrderLine


class OrderLineInline(admin.TabularInline):
    """Inline display of order line items."""

    model = OrderLine
    extra = 0
    # Prices are fixed at checkout
    readonly_fields = ('product', 'name', 'size', 'color', 'price', 'quantity')
    can_delete = False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """Admin configuration for customer orders."""

    list_display = ('order_id', 'customer_name', 'total', 'status', 'payment_status', 'created_at')
    list_filter = ('status', 'payment_status', 'payment_method', 'created_at')
    search_fields = ('order_id', 'tracking_number', 'promo_code')
    readonly_fields = ('order_id', 'owner_key', 'customer', 'shipping_address', 'shipped_at', 'delivered_at', 'created_at', 'updated_at')
    inlines = [OrderLineInline]
