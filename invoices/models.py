"""Database models for wholesalers and purchase invoices."""

from decimal import Decimal, ROUND_HALF_UP

from django.core.validators import MinValueValidator
from django.db import models

CENT = Decimal('0.01')


def compute_total_amount(gross_amount, gst_percentage=18, other_cost=0, discount=0) -> Decimal:
    """``gross + gross * gst% + other_cost - discount``, rounded to paise."""
    gross = Decimal(str(gross_amount or 0))
    gst = Decimal(str(18 if gst_percentage is None else gst_percentage))
    other = Decimal(str(other_cost or 0))
    disc = Decimal(str(discount or 0))
    total = gross + gross * gst / Decimal('100') + other - disc
    return total.quantize(CENT, rounding=ROUND_HALF_UP)


class Wholesaler(models.Model):
    """Supplier the shop buys stock from."""

    name = models.CharField(max_length=255)
    gst_number = models.CharField(max_length=20, blank=True, default='')
    area = models.CharField(max_length=255)
    city = models.CharField(max_length=255)
    state = models.CharField(max_length=255, blank=True, default='')
    contact_numbers = models.JSONField(default=list, blank=True)
    email = models.CharField(max_length=254, blank=True, default='')
    website = models.CharField(max_length=500, blank=True, default='')
    address = models.TextField(blank=True, default='')
    pincode = models.CharField(max_length=6, blank=True, default='')
    products_purchased = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-updated_at']

    def __str__(self):
        return f"{self.name} ({self.city})"


class Invoice(models.Model):
    """Purchase invoice received from a wholesaler.

    ``total_amount`` is derived on every save (see ``invoices.signals``);
    whatever a client sends for it is ignored.
    """

    invoice_number = models.CharField(max_length=50, unique=True)
    wholesaler = models.ForeignKey(Wholesaler, on_delete=models.SET_NULL, null=True, related_name='invoices')
    purchase_date = models.DateField()
    gross_amount = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)])
    gst_percentage = models.DecimalField(max_digits=5, decimal_places=2, default=18, validators=[MinValueValidator(0)])
    other_cost = models.DecimalField(max_digits=12, decimal_places=2, default=0, validators=[MinValueValidator(0)])
    discount = models.DecimalField(max_digits=12, decimal_places=2, default=0, validators=[MinValueValidator(0)])
    description = models.TextField(blank=True, default='')
    financial_year = models.CharField(max_length=20, db_index=True)
    total_amount = models.DecimalField(max_digits=12, decimal_places=2, default=0, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name = "Invoice"
        verbose_name_plural = "Invoices"

    def __str__(self):
        return f"Invoice {self.invoice_number}"
