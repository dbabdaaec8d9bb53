"""Signals keeping invoice totals consistent."""

from django.db.models.signals import pre_save
from django.dispatch import receiver

from .models import Invoice, compute_total_amount


@receiver(pre_save, sender=Invoice)
def recompute_invoice_total(sender, instance, **kwargs):
    """Derive ``total_amount`` from the invoice's amounts on every save."""
    instance.total_amount = compute_total_amount(
        instance.gross_amount,
        instance.gst_percentage,
        instance.other_cost,
        instance.discount,
    )
