"""Django admin configuration for catalog models."""

import csv

from django.contrib import admin
from django.http import HttpResponse

from variants.models import GarmentVariant

from .models import Category, HeaderCategory, Product, ShowcaseItem


class GarmentVariantInline(admin.TabularInline):
    """Inline view of the variants stocked under a product."""

    model = GarmentVariant
    fk_name = 'parent_product'
    extra = 0
    fields = ('kind', 'wholesaler', 'financial_year', 'quantity')


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin configuration for products."""

    list_display = ('name', 'slug', 'category', 'price', 'total_price', 'status', 'bestseller', 'trending', 'newarrival')
    list_filter = ('status', 'category', 'bestseller', 'trending', 'newarrival')
    search_fields = ('name', 'slug')
    filter_horizontal = ('related_products',)
    inlines = [GarmentVariantInline]
    actions = ['export_to_csv']

    def export_to_csv(self, request, queryset):
        """Export selected products as a CSV price list."""
        response = HttpResponse(content_type='text/csv; charset=utf-8-sig')
        response['Content-Disposition'] = 'attachment; filename="products.csv"'

        writer = csv.writer(response)
        writer.writerow(['Name', 'Slug', 'Status', 'Price', 'Total price', 'GST'])
        for product in queryset:
            writer.writerow([product.name, product.slug, product.status, product.price, product.total_price, product.gst])
        return response
    export_to_csv.short_description = 'Export selected products to CSV'


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ('name', 'slug', 'is_active', 'order')
    list_filter = ('is_active',)
    search_fields = ('name', 'slug')
    list_editable = ('is_active', 'order')


@admin.register(HeaderCategory)
class HeaderCategoryAdmin(admin.ModelAdmin):
    list_display = ('name', 'title', 'slug', 'is_active', 'order')
    list_filter = ('is_active',)
    search_fields = ('name', 'title', 'slug')


@admin.register(ShowcaseItem)
class ShowcaseItemAdmin(admin.ModelAdmin):
    list_display = ('title', 'collection', 'slug', 'price', 'mrp', 'ratings')
    list_filter = ('collection',)
    search_fields = ('title', 'slug', 'category')
