"""Django admin configuration for wholesalers and invoices."""

from django.contrib import admin
from django.urls import reverse
from django.utils.html import format_html

from .models import Invoice, Wholesaler


class InvoiceInline(admin.TabularInline):
    model = Invoice
    extra = 0
    fields = ('invoice_number', 'purchase_date', 'financial_year', 'total_amount')
    readonly_fields = ('total_amount',)
    show_change_link = True


@admin.register(Wholesaler)
class WholesalerAdmin(admin.ModelAdmin):
    """Admin configuration for wholesalers."""

    list_display = ('name', 'area', 'city', 'state', 'gst_number', 'updated_at')
    list_filter = ('city', 'state')
    search_fields = ('name', 'gst_number', 'city', 'area')
    inlines = [InvoiceInline]


@admin.register(Invoice)
class InvoiceAdmin(admin.ModelAdmin):
    """Admin configuration for invoices."""

    list_display = ('invoice_number', 'wholesaler', 'purchase_date', 'financial_year', 'get_total', 'pdf_button')
    list_filter = ('financial_year', 'purchase_date')
    search_fields = ('invoice_number', 'wholesaler__name')
    readonly_fields = ('total_amount', 'created_at', 'updated_at')
    raw_id_fields = ('wholesaler',)

    def get_total(self, obj):
        return f"Rs. {obj.total_amount}"
    get_total.short_description = 'Total'
    get_total.admin_order_field = 'total_amount'

    def pdf_button(self, obj):
        url = reverse('admin-invoice-pdf', args=[obj.pk])
        return format_html(
            '<a class="button" href="{}" target="_blank" rel="noopener" '
            'style="background-color:#417690; color:white; padding:5px 10px; border-radius:4px; '
            'text-decoration:none;">PDF</a>',
            url,
        )
    pdf_button.short_description = 'Print'
