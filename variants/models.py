"""Database model for garment variants (the stocked units of a product)."""

from django.db import models

from .kinds import KIND_CHOICES, KINDS


class GarmentVariant(models.Model):
    """A purchased batch of one garment kind.

    ``attributes`` holds the kind-specific manufacturing fields (fabric, work,
    sizing, manufacturer); the shared bookkeeping lives in real columns.
    Deleting the parent product or the wholesaler leaves the variant in place
    with that reference cleared.
    """

    kind = models.CharField(max_length=32, choices=KIND_CHOICES, db_index=True)
    parent_product = models.ForeignKey(
        'products.Product',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='variants',
    )
    wholesaler = models.ForeignKey(
        'invoices.Wholesaler',
        on_delete=models.SET_NULL,
        null=True,
        related_name='variants',
    )
    financial_year = models.CharField(max_length=20)
    quantity = models.PositiveIntegerField(default=0)
    attributes = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-updated_at']
        indexes = [
            models.Index(fields=['kind', 'parent_product'], name='variant_kind_parent_idx'),
        ]

    def __str__(self):
        return f"{self.kind_label} #{self.pk}"

    @property
    def kind_label(self):
        kind = KINDS.get(self.kind)
        return kind.label if kind else self.kind
