"""Django admin configuration for garment variants."""

from django.contrib import admin
from django.utils.html import format_html

from .models import GarmentVariant


@admin.register(GarmentVariant)
class GarmentVariantAdmin(admin.ModelAdmin):
    """Admin configuration for variant stock."""

    list_display = ('id', 'kind', 'parent_product', 'wholesaler', 'financial_year', 'colored_quantity', 'updated_at')
    list_filter = ('kind', 'financial_year', ('wholesaler', admin.RelatedOnlyFieldListFilter))
    search_fields = ('parent_product__name', 'wholesaler__name')
    raw_id_fields = ('parent_product', 'wholesaler')

    # Low stock in red, medium in orange.
    def colored_quantity(self, obj):
        if obj.quantity <= 3:
            color = 'red'
        elif obj.quantity <= 10:
            color = 'orange'
        else:
            color = 'green'
        return format_html('<b style="color: {};">{}</b>', color, obj.quantity)

    colored_quantity.short_description = 'Quantity'
    colored_quantity.admin_order_field = 'quantity'
