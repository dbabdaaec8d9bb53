"""Database models for promotional content and coupons."""

from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone

from core.models import SluggedModel


class Banner(models.Model):
    image = models.CharField(max_length=500)
    link = models.CharField(max_length=500, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.image


class Testimonial(models.Model):
    name = models.CharField(max_length=255)
    image = models.CharField(max_length=500)
    rating = models.DecimalField(
        max_digits=2,
        decimal_places=1,
        validators=[MinValueValidator(0), MaxValueValidator(5)],
    )
    review = models.TextField()
    sku = models.CharField(max_length=100, blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ({self.rating})"


class Blog(SluggedModel):
    slug_source = 'title'

    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True, blank=True)
    description = models.TextField()
    image = models.CharField(max_length=500)
    content = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.title


class Coupon(SluggedModel):
    """Discount code redeemable at checkout.

    ``code`` is stored upper-case and matched case-insensitively.
    """

    slug_source = 'code'

    TYPE_PERCENTAGE = 'percentage'
    TYPE_FLAT = 'flat'
    DISCOUNT_TYPE_CHOICES = (
        (TYPE_PERCENTAGE, 'Percentage'),
        (TYPE_FLAT, 'Flat'),
    )

    code = models.CharField(max_length=50, unique=True)
    slug = models.SlugField(max_length=60, unique=True, blank=True)
    description = models.CharField(max_length=255, blank=True, default='')
    discount_type = models.CharField(max_length=10, choices=DISCOUNT_TYPE_CHOICES)
    discount_value = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])
    min_purchase = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    max_discount = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    expires_at = models.DateTimeField(null=True, blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.code

    def save(self, *args, **kwargs):
        self.code = (self.code or '').strip().upper()
        super().save(*args, **kwargs)

    @property
    def is_expired(self):
        return self.expires_at is not None and self.expires_at < timezone.now()

    def discount_for(self, order_total):
        """Discount this coupon gives on ``order_total`` (never more than the total)."""
        if self.discount_type == self.TYPE_PERCENTAGE:
            amount = order_total * self.discount_value / 100
            if self.max_discount and amount > self.max_discount:
                amount = self.max_discount
        else:
            amount = self.discount_value
        return min(amount, order_total).quantize(Decimal('0.01'))


class AboutUs(models.Model):
    """Single "About us" page; admins upsert it in place."""

    title = models.CharField(max_length=255, blank=True, default='')
    description = models.TextField(blank=True, default='')
    # [{url, poster}]
    videos = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'About us page'
        verbose_name_plural = 'About us page'

    def __str__(self):
        return self.title or 'About us'


class Policy(models.Model):
    """Privacy, shipping or stitching policy text shown on the storefront."""

    KIND_PRIVACY = 'privacy'
    KIND_SHIPPING = 'shipping'
    KIND_STITCHING = 'stitching'
    KIND_CHOICES = (
        (KIND_PRIVACY, 'Privacy policy'),
        (KIND_SHIPPING, 'Shipping policy'),
        (KIND_STITCHING, 'Stitching policy'),
    )

    kind = models.CharField(max_length=20, choices=KIND_CHOICES)
    title = models.CharField(max_length=255)
    description = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-updated_at', '-id']
        verbose_name_plural = 'Policies'
        indexes = [
            models.Index(fields=['kind', '-updated_at'], name='policy_kind_updated_idx'),
        ]

    def __str__(self):
        return f"{self.get_kind_display()}: {self.title}"
